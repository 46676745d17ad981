import logging

import pytest

from tfidf_corpus.calculator import TfIdfCalculator
from tfidf_corpus.storage import ConnectionProvider

SEED_DOCUMENTS = [
    "this is a test document",
    "this document is another test",
]


@pytest.fixture
def calculator():
    return TfIdfCalculator(SEED_DOCUMENTS)


@pytest.fixture
def provider():
    with ConnectionProvider(":memory:") as p:
        yield p


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("tfidf_corpus")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
