# filename: errors.py


class HuffmanError(Exception):
    """Base class for errors raised by huffman_codebook."""


class EmptyAlphabetError(HuffmanError, ValueError):
    """A Huffman tree was requested for a frequency table with no symbols."""

    def __init__(self, message="cannot build a Huffman tree from an empty frequency table"):
        super().__init__(message)


class EmptyTextError(HuffmanError, ZeroDivisionError):
    """Probabilities or statistics were requested for a text of zero symbols."""

    def __init__(self, message="total symbol count is 0"):
        super().__init__(message)
