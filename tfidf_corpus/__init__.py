"""TF-IDF relevance scoring against an accumulating document corpus."""

from tfidf_corpus.errors import (
    TfIdfError,
    InvalidArgumentError,
    ConfigurationError,
    StorageError,
)
from tfidf_corpus.math_utils import smoothed_idf, weighted_sum
from tfidf_corpus.tokenizer import Tokenizer
from tfidf_corpus.corpus import CorpusIndex, CorpusSnapshot
from tfidf_corpus.tfidf_scorer import TfIdfScorer
from tfidf_corpus.calculator import TfIdfCalculator
from tfidf_corpus.fingerprint import compute_fingerprint
from tfidf_corpus.storage import ConnectionProvider, StorageConnection
from tfidf_corpus.registry import DocumentRegistry
from tfidf_corpus.config import load_config
from tfidf_corpus.logging_utils import setup_logging

__all__ = [
    "TfIdfError",
    "InvalidArgumentError",
    "ConfigurationError",
    "StorageError",
    "smoothed_idf",
    "weighted_sum",
    "Tokenizer",
    "CorpusIndex",
    "CorpusSnapshot",
    "TfIdfScorer",
    "TfIdfCalculator",
    "compute_fingerprint",
    "ConnectionProvider",
    "StorageConnection",
    "DocumentRegistry",
    "load_config",
    "setup_logging",
]
