"""
tree.py

Huffman tree nodes and the greedy tree builder.
"""


import heapq
from itertools import count
from typing import List, Optional, Tuple

from .logger import Logger, TreeConstructionLog, TreeConstructionProgressStep
from .models import FrequencyTable, Symbol


class HuffmanNode:
    """
    A node of a Huffman tree.

    A leaf holds one symbol and its frequency. An internal node holds no symbol
    and owns a left and a right child whose frequencies sum to its own. The
    synthetic root built for a single-symbol input is the only node with one
    child (right is None).
    """

    __slots__ = ("_symbol", "_frequency", "_left", "_right")

    def __init__(self,
                 symbol: Optional[Symbol],
                 frequency: int,
                 left: Optional["HuffmanNode"] = None,
                 right: Optional["HuffmanNode"] = None) -> None:
        if symbol is not None and (left is not None or right is not None):
            raise ValueError("A leaf node cannot have children")
        if symbol is None and left is None:
            raise ValueError("An internal node must have a left child")
        self._symbol = symbol
        self._frequency = frequency
        self._left = left
        self._right = right

    @property
    def symbol(self) -> Optional[Symbol]:
        return self._symbol

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def left(self) -> Optional["HuffmanNode"]:
        return self._left

    @property
    def right(self) -> Optional["HuffmanNode"]:
        return self._right

    @property
    def is_leaf(self) -> bool:
        return self._symbol is not None

    def children(self) -> List["HuffmanNode"]:
        return [child for child in (self._left, self._right) if child is not None]

    def depth(self) -> int:
        """
        Get the number of edges on the longest root-to-leaf path.
        """
        deepest = 0
        stack: List[Tuple[HuffmanNode, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node.children():
                stack.append((child, level + 1))
        return deepest

    def leaves(self) -> List["HuffmanNode"]:
        """
        Get the leaves of the subtree, left to right.
        """
        result = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                result.append(node)
            else:
                stack.extend(reversed(node.children()))
        return result

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"HuffmanNode({self._symbol!r}, {self._frequency})"
        return f"HuffmanNode(internal, {self._frequency})"


def build_tree(frequency_table: FrequencyTable, logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build a Huffman tree by repeatedly merging the two least frequent nodes.

    Nodes are ordered by (frequency, sequence number). Leaves are numbered in
    the table's insertion order and every merged node takes the next number,
    so equal frequencies are resolved by insertion order. The first node
    removed becomes the left child.

    Args:
        frequency_table (FrequencyTable): A non-empty table of symbol counts.
        logger (Optional[Logger]): An optional logger for progress reporting.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        ValueError: If the table is empty.
    """
    if not isinstance(frequency_table, FrequencyTable):
        raise ValueError("frequency_table must be an instance of FrequencyTable")
    if frequency_table.get_size() == 0:
        raise ValueError("Cannot build a Huffman tree from an empty frequency table")

    sequence = count()
    heap: List[Tuple[int, int, HuffmanNode]] = []
    for symbol, frequency in frequency_table.items():
        heap.append((frequency, next(sequence), HuffmanNode(symbol, frequency)))
    heapq.heapify(heap)

    if len(heap) == 1:
        _, _, leaf = heap[0]
        root = HuffmanNode(None, leaf.frequency, left=leaf)
    else:
        merges = len(heap) - 1
        if logger is not None:
            logger.reset_progress(TreeConstructionProgressStep)
        while len(heap) > 1:
            left_freq, _, left = heapq.heappop(heap)
            right_freq, _, right = heapq.heappop(heap)
            merged = HuffmanNode(None, left_freq + right_freq, left=left, right=right)
            heapq.heappush(heap, (merged.frequency, next(sequence), merged))
            if logger is not None:
                logger.log(TreeConstructionProgressStep("Merging nodes", merges))
        _, _, root = heap[0]

    if logger is not None:
        logger.log(TreeConstructionLog(frequency_table.get_size(), root.depth()))
    return root
