"""Entry point: build a corpus from a file and score texts against it."""

import argparse
import logging
import sys

from tfidf_corpus.calculator import TfIdfCalculator
from tfidf_corpus.config import load_config
from tfidf_corpus.errors import TfIdfError
from tfidf_corpus.logging_utils import setup_logging
from tfidf_corpus.registry import DocumentRegistry
from tfidf_corpus.storage import ConnectionProvider

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Score texts by TF-IDF against a corpus of documents."
    )
    parser.add_argument("texts", nargs="+", help="Texts to score")
    parser.add_argument(
        "--corpus", help="File with one corpus document per line"
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--explain", action="store_true", help="Print per-term weights"
    )
    parser.add_argument("--log-level", help="Override logging.level")
    return parser


def read_corpus_lines(path):
    """Yield the non-blank lines of a corpus file."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield line


def build_calculator(config, provider, corpus_path=None):
    """Create a calculator seeded from config and an optional corpus file.

    Every added document is also recorded in the seen-document registry;
    repeats are still added to the corpus.
    """
    registry = DocumentRegistry(provider.get_shared_connection())
    calculator = TfIdfCalculator()
    documents = list(config["corpus"]["seed_documents"])
    if corpus_path:
        documents.extend(read_corpus_lines(corpus_path))
    for text in documents:
        if not registry.record(text):
            logger.debug("Document already seen, counting it again")
        calculator.add_document_to_corpus(text)
    logger.info(
        "Corpus ready: %d documents, %d distinct",
        calculator.document_count, registry.count(),
    )
    return calculator


def main(argv=None):
    """Parse arguments, build the corpus and print one score per text."""
    args = build_parser().parse_args(argv)
    try:
        overrides = {"logging": {"level": args.log_level}} if args.log_level else None
        config = load_config(args.config, overrides)
        setup_logging(config["logging"]["level"])
        with ConnectionProvider(config["storage"]["database"]) as provider:
            calculator = build_calculator(config, provider, args.corpus)
            for text in args.texts:
                score = calculator.calculate_document_tfidf(text)
                print("%.6f\t%s" % (score, text))
                if args.explain:
                    weights = calculator.term_weights(text)
                    for term, weight in sorted(weights.items(), key=lambda x: -x[1]):
                        print("    %-20s %.6f" % (term, weight))
    except (TfIdfError, OSError) as e:
        print("error: %s" % e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
