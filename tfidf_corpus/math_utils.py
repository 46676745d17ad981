"""Numeric helpers that keep TF-IDF scores finite."""

import math


def smoothed_idf(n, df):
    """Smoothed inverse document frequency.

    IDF(t) = ln((1 + N) / (1 + df(t))) + 1

    Both counts are shifted by one, so the ratio is strictly positive for
    any N >= 0 and df >= 0: an empty corpus or an unseen term gives a finite
    value instead of -inf, NaN or a division error. CorpusIndex keeps
    df <= N, so the result is never below 1.
    """
    return math.log((1.0 + n) / (1.0 + df)) + 1.0


def weighted_sum(weights):
    """Sum of weights, 0.0 for an empty iterable.

    Uses math.fsum so long documents do not accumulate rounding error.
    """
    return math.fsum(weights)
