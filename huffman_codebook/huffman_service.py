# filename: huffman_service.py

import logging
from collections import Counter, namedtuple

from .frequency import count, normalize
from .huffman_core import TIE_BREAK_INSERTION, HuffmanLogic
from .stats import summarize

logger = logging.getLogger(__name__)

Codebook = namedtuple("Codebook", "counts, total, probabilities, root, codes")


class HuffmanService:
    """
    Runs the whole pipeline: text -> frequency table -> merge tree -> code table.

    ``tie_break`` picks the rule used for equal weights (see HuffmanLogic).
    With ``use_probabilities`` the tree is built from normalized probabilities
    instead of raw counts; code lengths are the same either way unless float
    rounding splits a tie.
    """

    def __init__(self, tie_break=TIE_BREAK_INSERTION, use_probabilities=False):
        self.logic = HuffmanLogic(tie_break)
        self.use_probabilities = use_probabilities

    def codebook(self, data):
        counts, total = count(data)
        if not total:
            return Codebook(Counter(), 0, {}, None, {})

        probabilities = normalize(counts, total)
        weights = probabilities if self.use_probabilities else counts
        tree = self.logic.build_tree(weights)
        codes = self.logic.generate_codes(tree)

        logger.debug(
            "built code table for %d symbols (%d total, tie-break %s)",
            len(codes), total, self.logic.tie_break,
        )
        return Codebook(counts, total, probabilities, tree, codes)

    def code_table(self, data):
        return self.codebook(data).codes

    def describe(self, data):
        book = self.codebook(data)
        return summarize(book.codes, book.counts, book.total)
