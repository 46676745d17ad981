"""Public entry point: register documents and score new ones."""

from tfidf_corpus.corpus import CorpusIndex
from tfidf_corpus.errors import require_text
from tfidf_corpus.tfidf_scorer import TfIdfScorer
from tfidf_corpus.tokenizer import Tokenizer


class TfIdfCalculator:
    """Keeps a growing corpus and scores documents against it.

    Typical use::

        calculator = TfIdfCalculator()
        calculator.add_document_to_corpus("this is a test document")
        calculator.calculate_document_tfidf("this is a test")

    Both operations raise InvalidArgumentError for a None document. Any
    str, including "", is valid and scores to a finite number.
    """

    def __init__(self, seed_documents=None, tokenizer=None):
        tokenizer = tokenizer or Tokenizer()
        self.corpus = CorpusIndex(tokenizer)
        self.scorer = TfIdfScorer(self.corpus, tokenizer)
        for text in seed_documents or ():
            self.add_document_to_corpus(text)

    def add_document_to_corpus(self, text):
        """Add a document's terms to the corpus frequency counts."""
        self.corpus.add_document(require_text(text))

    def calculate_document_tfidf(self, text):
        """Return the TF-IDF score of text against the corpus as it is now."""
        return self.scorer.score(require_text(text))

    def term_weights(self, text):
        """Return the per-term contributions to calculate_document_tfidf."""
        return self.scorer.term_weights(require_text(text))

    def frequency_of(self, term):
        """Number of corpus documents containing term."""
        return self.corpus.frequency_of(term)

    @property
    def document_count(self):
        """Number of documents added to the corpus."""
        return self.corpus.size()
