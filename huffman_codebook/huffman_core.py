# filename: huffman_core.py

import heapq
from itertools import count as sequence

from .errors import EmptyAlphabetError

TIE_BREAK_INSERTION = "insertion"
TIE_BREAK_LABEL = "label"
TIE_BREAKS = (TIE_BREAK_INSERTION, TIE_BREAK_LABEL)


class MergeNode:
    """A node of the merge tree: either a Leaf or an Internal node."""

    is_leaf = False
    left = None
    right = None

    def __init__(self, weight, label):
        self.weight = weight
        self.label = label

    def __repr__(self):
        return f"{type(self).__name__}(weight={self.weight!r}, label={self.label!r})"


class Leaf(MergeNode):
    is_leaf = True

    def __init__(self, symbol, weight):
        super().__init__(weight, (symbol,))
        self.symbol = symbol


class Internal(MergeNode):
    def __init__(self, left, right):
        # Label is the concatenation of the children's labels, only used for ordering.
        super().__init__(left.weight + right.weight, left.label + right.label)
        self.left = left
        self.right = right


def _check_tie_break(tie_break):
    if tie_break not in TIE_BREAKS:
        raise ValueError(
            f"unknown tie-break rule {tie_break!r}, expected one of {', '.join(TIE_BREAKS)}"
        )
    return tie_break


class HuffmanLogic:
    """
    Greedy Huffman construction with an explicit tie-break rule.

    ``insertion`` extracts equal-weight nodes in FIFO order: leaves in the
    frequency table's iteration order, merged nodes in the order they were
    created. ``label`` extracts the node with the smaller label tuple first.
    """

    def __init__(self, tie_break=TIE_BREAK_INSERTION):
        self.tie_break = _check_tie_break(tie_break)

    def _entry(self, node, seq):
        # Heap entries never compare nodes themselves: seq is unique.
        if self.tie_break == TIE_BREAK_LABEL:
            return (node.weight, node.label, seq, node)
        return (node.weight, seq, node)

    def build_tree(self, freqs):
        if not freqs:
            raise EmptyAlphabetError()

        seq = sequence()
        priority_queue = [self._entry(Leaf(symbol, weight), next(seq)) for symbol, weight in freqs.items()]
        heapq.heapify(priority_queue)

        # Merge the two lightest nodes until only the root is left
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)[-1]
            right = heapq.heappop(priority_queue)[-1]
            heapq.heappush(priority_queue, self._entry(Internal(left, right), next(seq)))

        return priority_queue[0][-1]

    def generate_codes(self, root):
        if root.is_leaf:
            return {root.symbol: "0"}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, current_code = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = current_code
                continue
            # Right first so the left subtree is visited first.
            stack.append((node.right, current_code + "1"))
            stack.append((node.left, current_code + "0"))
        return codes


def build(freqs, tie_break=TIE_BREAK_INSERTION):
    """Build the merge tree for ``freqs`` and return its root."""
    return HuffmanLogic(tie_break).build_tree(freqs)


def assign(root):
    """Return the code table ``{symbol: bit string}`` for a merge tree."""
    return HuffmanLogic().generate_codes(root)
