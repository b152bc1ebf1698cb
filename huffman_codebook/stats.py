# filename: stats.py
"""Checks and summary figures for a finished code table."""

import math
from collections import namedtuple

from .errors import EmptyTextError
from .frequency import normalize

CodebookStats = namedtuple(
    "CodebookStats", "symbols, total, average_length, entropy, efficiency, kraft_sum"
)


def is_prefix_free(codes):
    """True when no code in ``codes`` is a prefix of another one."""
    # After sorting, a prefix always sits directly before some code it prefixes.
    ordered = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))


def kraft_sum(codes):
    """Sum of 2^-len(code); exactly 1.0 for a complete code tree."""
    return math.fsum(2.0 ** -len(code) for code in codes.values())


def average_length(codes, probabilities):
    """Expected code length in bits per symbol."""
    return math.fsum(prob * len(codes[symbol]) for symbol, prob in probabilities.items())


def entropy(probabilities):
    """Shannon entropy in bits per symbol."""
    return math.fsum(p * math.log2(1 / p) for p in probabilities.values() if p > 0)


def efficiency(codes, probabilities):
    mean = average_length(codes, probabilities)
    if mean == 0:
        return 0.0
    return entropy(probabilities) / mean


def summarize(codes, counts, total):
    if total == 0:
        raise EmptyTextError("cannot summarize a code table for an empty text")
    probabilities = normalize(counts, total)
    return CodebookStats(
        symbols=len(codes),
        total=total,
        average_length=average_length(codes, probabilities),
        entropy=entropy(probabilities),
        efficiency=efficiency(codes, probabilities),
        kraft_sum=kraft_sum(codes),
    )
