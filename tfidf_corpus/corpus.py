"""Append-only corpus index holding document frequencies for TF-IDF."""

import logging
import threading
from collections import namedtuple
from types import MappingProxyType

from tfidf_corpus.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class CorpusSnapshot(namedtuple("CorpusSnapshot", ["document_count", "frequencies"])):
    """Consistent view of N and df(t) for a set of terms."""

    __slots__ = ()

    def frequency_of(self, term):
        return self.frequencies.get(term, 0)


class CorpusIndex:
    """Counts documents and, per term, the documents containing it.

    Only counts are kept; the raw text of added documents is discarded.
    The index never forgets a document: there is no removal operation.

    A single lock guards document_count and document_frequency together.
    add_document holds it for the whole read-modify-write and snapshot
    holds it while reading, so readers never see a document counted in N
    without its terms counted in df (or the reverse).
    """

    def __init__(self, tokenizer=None):
        self.tokenizer = tokenizer or Tokenizer()
        self._lock = threading.Lock()
        self._document_count = 0
        self._document_frequency = {}  # term -> document frequency

    def add_document(self, text):
        """Count a document and each distinct term in it.

        A document without terms still counts towards N. Returns the set
        of distinct terms that were counted.
        """
        terms = set(self.tokenizer.tokenize(text))
        with self._lock:
            for term in terms:
                self._document_frequency[term] = self._document_frequency.get(term, 0) + 1
            self._document_count += 1
            n = self._document_count
        logger.debug("Added document %d with %d distinct terms", n, len(terms))
        return terms

    def frequency_of(self, term):
        """Number of added documents containing term (0 if never seen)."""
        with self._lock:
            return self._document_frequency.get(term, 0)

    def size(self):
        """Number of documents added so far."""
        with self._lock:
            return self._document_count

    def vocabulary_size(self):
        """Number of distinct terms seen across the corpus."""
        with self._lock:
            return len(self._document_frequency)

    def snapshot(self, terms):
        """Read N and df(t) for every term in terms under one lock."""
        with self._lock:
            frequencies = {t: self._document_frequency.get(t, 0) for t in terms}
            n = self._document_count
        return CorpusSnapshot(n, MappingProxyType(frequencies))

    def __len__(self):
        return self.size()

    def __contains__(self, term):
        return self.frequency_of(term) > 0
