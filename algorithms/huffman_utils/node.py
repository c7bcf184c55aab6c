"""
Nodes of the Huffman tree.

A tree is made of two kinds of nodes: a Leaf holds a symbol,
a Branch owns a left and a right child. Both carry a frequency.
"""

LEFT = 0
RIGHT = 1


class Leaf:
    """
    Terminal node of Huffman's tree
    """

    __match_args__ = ("symbol", "freq")

    def __init__(self, symbol, freq: int = 0):
        """
        :param symbol: value held by node
        :param freq: int, the frequency of this value in the data
        """
        self.symbol = symbol
        self.freq = freq

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.freq})"


class Branch:
    """
    Inner node of Huffman's tree, owns exactly two children once built
    """

    __match_args__ = ("freq", "left", "right")

    def __init__(self, freq: int = 0, left=None, right=None):
        """
        :param freq: int, combined frequency of both subtrees
        :param left: child reached by a 0 bit
        :param right: child reached by a 1 bit
        """
        self.freq = freq
        self.left = left
        self.right = right

    def child(self, direction):
        """Return the child in the given direction (0 - left, 1 - right)."""
        return self.right if direction else self.left

    def set_child(self, direction, node):
        if direction:
            self.right = node
        else:
            self.left = node

    def __repr__(self):
        return f"Branch({self.freq}, {self.left!r}, {self.right!r})"
