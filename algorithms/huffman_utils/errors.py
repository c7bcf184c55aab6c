"""Errors raised by Huffman encoding and decoding"""


class HuffmanError(ValueError):
    """Base class for malformed Huffman data."""


class MissingCodeEntryError(HuffmanError):
    """A symbol of the input has no code in the code map."""

    def __init__(self, symbol):
        super().__init__(f"Symbol {symbol!r} not found in code map")
        self.symbol = symbol


class MalformedDecodeError(HuffmanError):
    """Encoded bits do not match the tree rebuilt from the code map."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (bit {position})")
        self.position = position


class PrefixConflictError(HuffmanError):
    """Code map is not prefix-free, a code runs into another one."""

    def __init__(self, symbol, path):
        super().__init__(
            f"Code {path.to01()!r} of symbol {symbol!r} clashes with another code"
        )
        self.symbol = symbol
        self.path = path


class MalformedTreeError(HuffmanError):
    """Tree has a missing child or a node that is neither Leaf nor Branch."""
