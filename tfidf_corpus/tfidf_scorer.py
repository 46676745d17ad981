"""TF-IDF scoring of a document against a corpus index."""

from tfidf_corpus.math_utils import smoothed_idf, weighted_sum


class TfIdfScorer:
    """Scores text by summing raw term frequency times smoothed IDF.

    score(d) = sum over distinct terms t in d of tf(t, d) * IDF(t)

    The scorer only reads the corpus. Every call takes one snapshot of the
    corpus, so N and all df(t) values used in a score belong together.
    """

    def __init__(self, corpus, tokenizer=None):
        self.corpus = corpus
        self.tokenizer = tokenizer or corpus.tokenizer

    def idf(self, term):
        """Smoothed IDF of a single term against the current corpus."""
        snapshot = self.corpus.snapshot([term])
        return smoothed_idf(snapshot.document_count, snapshot.frequency_of(term))

    def term_weights(self, text):
        """Per-term tf * idf contributions for text."""
        counts = self.tokenizer.term_counts(text)
        snapshot = self.corpus.snapshot(counts)
        n = snapshot.document_count
        return {
            term: tf * smoothed_idf(n, snapshot.frequency_of(term))
            for term, tf in counts.items()
        }

    def score(self, text):
        """TF-IDF score of text; 0.0 when text has no terms."""
        return weighted_sum(self.term_weights(text).values())
