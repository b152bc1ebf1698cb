from .errors import EmptyAlphabetError, EmptyTextError, HuffmanError
from .frequency import count, normalize, probability_pairs
from .huffman_core import (
    TIE_BREAK_INSERTION,
    TIE_BREAK_LABEL,
    TIE_BREAKS,
    HuffmanLogic,
    Internal,
    Leaf,
    MergeNode,
    assign,
    build,
)
from .huffman_service import Codebook, HuffmanService
from .stats import CodebookStats, summarize

__version__ = "0.1.0"
