# filename: frequency.py

from collections import Counter

from .errors import EmptyTextError


def count(text):
    """
    Count every symbol of ``text`` in a single pass.

    Returns ``(counts, total)`` where ``counts`` is a Counter keyed in order of
    first appearance and ``total`` is the number of symbols read. An empty
    text gives ``(Counter(), 0)``.
    """
    counts = Counter()
    total = 0
    for symbol in text:
        counts[symbol] += 1
        total += 1
    return counts, total


def normalize(counts, total):
    """Map each count to ``count / total``, keeping the table's key order."""
    if total == 0:
        raise EmptyTextError("cannot normalize counts of an empty text")
    return {symbol: freq / total for symbol, freq in counts.items()}


def probability_pairs(probabilities):
    # Most probable first; equal probabilities keep table order (sorted() is stable).
    pairs = [(prob, symbol) for symbol, prob in probabilities.items()]
    return sorted(pairs, key=lambda pair: pair[0], reverse=True)
