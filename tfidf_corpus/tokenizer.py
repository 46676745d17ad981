"""Unicode-aware tokenizer for TF-IDF text processing."""

import re
from collections import Counter

from tfidf_corpus.errors import require_text


class Tokenizer:
    """Case-fold and split on anything that is not a Unicode letter or digit."""

    # \W covers every non-alphanumeric code point; "_" is a word character
    # for the re module but not alphanumeric.
    _SPLIT_PATTERN = re.compile(r"[\W_]+")

    def tokenize(self, text):
        """Return the list of terms in text, in order of appearance."""
        require_text(text)
        # Split before folding: casefold can emit combining marks
        # ("İ" -> "i" + U+0307) that would otherwise split a run.
        tokens = self._SPLIT_PATTERN.split(text)
        return [t.casefold() for t in tokens if t]

    def term_counts(self, text):
        """Count occurrences of each term in text."""
        return Counter(self.tokenize(text))
