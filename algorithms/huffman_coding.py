"""
Huffman coding algorithm -
data compression algorithm
"""
import logging
from collections import defaultdict
from typing import NamedTuple

from bitarray import bitarray

from algorithms.huffman_utils.errors import (
    MalformedDecodeError,
    MalformedTreeError,
    MissingCodeEntryError,
    PrefixConflictError,
)
from algorithms.huffman_utils.node import LEFT, RIGHT, Branch, Leaf
from algorithms.huffman_utils.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

BIT_ENDIAN = "big"


class HuffmanCoding(NamedTuple):
    """
    Result of encoding: code map of every symbol and the encoded bits.
    Code map has to travel with the bits, nothing else is kept.
    """

    codes: dict
    data: bitarray

    def to01(self) -> str:
        return self.data.to01()


def _as_bits(value) -> bitarray:
    """Accepts a bitarray, a '0101' string or an iterable of bools."""
    if isinstance(value, bitarray):
        return value
    return bitarray(value, endian=BIT_ENDIAN)


def frequency_table(data) -> dict | None:
    """
    Function builds dictionary with frequency
    of each symbol for given data.

    Keys keep the order of their first occurrence in data,
    this order decides the tree shape when frequencies are equal.

    :param data: sequence of symbols (str, bytes, list, ...)
    :return: dict, dictionary with symbol frequency,
        None if there is no data
    """
    if data is None or len(data) == 0:
        return None

    char_frequency_dict = defaultdict(int)
    for el in data:
        char_frequency_dict[el] += 1

    return dict(char_frequency_dict)


def build_tree(freq_table: dict | None):
    """
    Function builds Huffman Tree.

    Every symbol becomes a leaf in the queue, then two nodes with
    the smallest frequencies are merged into a branch until one
    node is left. The node with the bigger frequency is the right child.

    :param freq_table: dict, symbol frequencies
    :return: root node, None if there is no frequency table
    """
    if freq_table is None:
        return None

    queue = PriorityQueue(Leaf(symbol, freq) for symbol, freq in freq_table.items())
    while queue.size() > 1:
        first = queue.dequeue()
        second = queue.dequeue()
        if first.freq > second.freq:
            first, second = second, first
        queue.enqueue(Branch(first.freq + second.freq, first, second))

    root = queue.dequeue()
    if root is not None:
        logger.debug(
            "Built Huffman tree for %d symbols, total weight %d",
            len(freq_table),
            root.freq,
        )
    return root


def _traverse(node, path: bitarray, codes: dict):
    """
    Preorder traversal of Huffman's tree that writes
    the code of every leaf into codes.

    :param node: node to start traversal from
    :param path: bitarray, path from the root to node, restored on return
    :param codes: dict to write codes to
    """
    match node:
        case Leaf(symbol):
            codes[symbol] = path.copy()
        case Branch(left=left, right=right):
            # a tree rebuilt from an incomplete code map may miss children
            path.append(LEFT)
            if left is not None:
                _traverse(left, path, codes)
            path[-1] = RIGHT
            if right is not None:
                _traverse(right, path, codes)
            path.pop()
        case _:
            raise MalformedTreeError(f"Unexpected node {node!r} at {path.to01()!r}")


def build_code(tree) -> dict | None:
    """
    Function builds map of symbols and their codes from a tree.

    :param tree: root node of Huffman tree
    :return: dict, symbol -> bitarray path from the root to its leaf,
        None if there is no tree
    """
    if tree is None:
        return None

    codes = {}
    _traverse(tree, bitarray(endian=BIT_ENDIAN), codes)
    return codes


def _encode_symbols(codes: dict, data) -> bitarray:
    res = bitarray(endian=BIT_ENDIAN)
    for symbol in data:
        try:
            code = codes[symbol]
        except KeyError:
            raise MissingCodeEntryError(symbol) from None
        res.extend(code)
    return res


def encode(data) -> HuffmanCoding | None:
    """
    Function encodes data using Huffman algorithm.

    :param data: sequence of symbols
    :return: HuffmanCoding with code map and encoded bits,
        None if there is no data
    """
    table = frequency_table(data)
    tree = build_tree(table)
    codes = build_code(tree)
    if codes is None:
        return None

    if len(codes) == 1:
        logger.warning(
            "Single symbol %r gets an empty code, encoded data keeps no length",
            next(iter(codes)),
        )

    res = _encode_symbols(codes, data)
    logger.debug("Encoded %d symbols into %d bits", len(data), len(res))
    return HuffmanCoding(codes, res)


def reconstruct_tree(codes: dict):
    """
    Function rebuilds the structure of Huffman tree from a code map.
    All frequencies of the rebuilt tree are 0.

    :param codes: dict, symbol -> path of the symbol
    :return: root node
    """
    if len(codes) == 1:
        ((symbol, path),) = codes.items()
        if len(_as_bits(path)) == 0:
            return Leaf(symbol)

    root = Branch()
    for symbol, path in codes.items():
        path = _as_bits(path)
        if len(path) == 0:
            raise PrefixConflictError(symbol, path)

        curr = root
        for direction in path[:-1]:
            nxt = curr.child(direction)
            match nxt:
                case None:
                    nxt = Branch()
                    curr.set_child(direction, nxt)
                case Leaf():
                    raise PrefixConflictError(symbol, path)
            curr = nxt

        if curr.child(path[-1]) is not None:
            raise PrefixConflictError(symbol, path)
        curr.set_child(path[-1], Leaf(symbol))

    return root


def _walk(root, data: bitarray) -> list:
    """
    Walks the tree bit by bit, every reached leaf gives a symbol
    and the walk starts again from the root.
    """
    decoded = []
    curr = root
    for position, direction in enumerate(data):
        match curr:
            case Branch():
                curr = curr.child(direction)
            case _:
                raise MalformedDecodeError("Code map has no code for these bits", position)

        match curr:
            case Leaf(symbol):
                decoded.append(symbol)
                curr = root
            case None:
                raise MalformedDecodeError("No code starts with these bits", position)

    if curr is not root:
        raise MalformedDecodeError("Encoded data ends in the middle of a code", len(data))
    return decoded


def _join(symbols: list, alphabet):
    if all(isinstance(symbol, str) and len(symbol) == 1 for symbol in alphabet):
        return "".join(symbols)
    return symbols


def decode(codes, data=None):
    """
    Function decodes data using a map of symbols and their codes.

    :param codes: dict, code map, or HuffmanCoding returned by encode
    :param data: encoded bits (bitarray, '0101' string or iterable of bools),
        taken from codes when it is a HuffmanCoding
    :return: str if every symbol is a character, list of symbols otherwise
    """
    if isinstance(codes, HuffmanCoding):
        codes, coded_data = codes
        if data is None:
            data = coded_data
    if data is None:
        raise TypeError("decode() needs encoded data along with a code map")

    data = _as_bits(data)
    decoded = _walk(reconstruct_tree(codes), data)
    logger.debug("Decoded %d bits into %d symbols", len(data), len(decoded))
    return _join(decoded, codes)


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Object includes encoding
    and decoding.
    """

    def __init__(self, data=None):
        """
        Function initializes the structure of Huffman Tree.

        :param data: sequence of symbols to build the tree for
        """
        self.char_frequency_dict = frequency_table(data)
        self.root = build_tree(self.char_frequency_dict)
        self.res_codes = build_code(self.root) or {}

    @classmethod
    def build_from_freq(cls, freq_dict: dict) -> "HuffmanTree":
        """
        Builds Huffman tree and codes from an external frequency dictionary.

        :param freq_dict: dict {symbol: frequency}
        """
        tree = cls()
        tree.char_frequency_dict = dict(freq_dict)
        tree.root = build_tree(tree.char_frequency_dict)
        tree.res_codes = build_code(tree.root) or {}
        return tree

    @classmethod
    def from_codes(cls, codes: dict) -> "HuffmanTree":
        """
        Builds the tree structure back from a code map, frequencies are unknown.

        :param codes: dict {symbol: path}
        """
        tree = cls()
        tree.root = reconstruct_tree(codes)
        tree.res_codes = {symbol: _as_bits(path).copy() for symbol, path in codes.items()}
        return tree

    def encode(self, data) -> bitarray:
        """
        Encodes data with the codes of this tree.

        :param data: sequence of symbols
        :return: bitarray, encoded data
        """
        return _encode_symbols(self.res_codes, data)

    def decode(self, data):
        """
        Decodes bits by walking this tree.

        :param data: encoded bits
        :return: str if every symbol is a character, list of symbols otherwise
        """
        return _join(_walk(self.root, _as_bits(data)), self.res_codes)
