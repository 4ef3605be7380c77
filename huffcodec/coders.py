"""
coders.py

Code generation, encoding and decoding over a Huffman tree, plus bit packing
helpers for writing bit strings to binary streams.

"""


from io import BytesIO
from typing import Dict, IO, Iterable, List, Optional, Tuple

from .exceptions import MalformedBitStringError, SymbolNotInCodeTableError
from .logger import Logger, CodeAssignmentLog, CodingLog, CodingProgressStep
from .models import Symbol
from .tree import HuffmanNode
from .validators import validate_bit_string, validate_type


def generate_codes(root: HuffmanNode, logger: Optional[Logger] = None) -> Dict[Symbol, str]:
    """
    Assign a bit string to every leaf of the tree.

    Walks the tree depth first, left before right, appending '0' for a left
    edge and '1' for a right edge. A leaf reached with no edges gets "0".

    Args:
        root (HuffmanNode): The root of the tree.
        logger (Optional[Logger]): An optional logger.

    Returns:
        Dict[Symbol, str]: The prefix-free code of every symbol.
    """
    validate_type(root, "Root", HuffmanNode)
    codes: Dict[Symbol, str] = {}
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = code or "0"
            if logger is not None:
                logger.log(CodeAssignmentLog(node.symbol, codes[node.symbol]))
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


class HuffmanEncoder:
    """
    Maps symbols through a code table.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def encode(self, symbols: Iterable[Symbol], code_table: Dict[Symbol, str]) -> str:
        """
        Concatenate the codes of the symbols in input order.

        Args:
            symbols (Iterable[Symbol]): The symbols to encode.
            code_table (Dict[Symbol, str]): The code of every symbol in the input.

        Returns:
            str: The encoded bit string.

        Raises:
            SymbolNotInCodeTableError: If a symbol has no code.
        """
        symbols = list(symbols)
        if self.logger is not None:
            self.logger.reset_progress(CodingProgressStep)
        parts = []
        for position, symbol in enumerate(symbols):
            code = code_table.get(symbol)
            if code is None:
                raise SymbolNotInCodeTableError(symbol, position)
            parts.append(code)
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols", len(symbols)))
        encoded = "".join(parts)
        if self.logger is not None:
            self.logger.log(CodingLog(len(symbols), len(encoded)))
        return encoded


class HuffmanDecoder:
    """
    Walks a Huffman tree bit by bit to recover symbols.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def decode(self, bits: str, root: Optional[HuffmanNode]) -> List[Symbol]:
        """
        Decode a bit string.

        '0' moves to the left child and any other bit to the right child. Each
        time a leaf is reached its symbol is emitted and the walk restarts at
        the root.

        Args:
            bits (str): The encoded bit string.
            root (Optional[HuffmanNode]): The tree used for encoding, or None.

        Returns:
            List[Symbol]: The decoded symbols, empty if there is no tree.

        Raises:
            MalformedBitStringError: If a bit leads to a missing child or the
                bits end in the middle of a path.
        """
        validate_type(bits, "Bits", str)
        if root is None or not bits:
            return []
        if self.logger is not None:
            self.logger.reset_progress(CodingProgressStep)
        if root.is_leaf:
            return self._decode_single_leaf(bits, root)

        symbols: List[Symbol] = []
        node = root
        path_start = 0
        for position, bit in enumerate(bits):
            if node is root:
                path_start = position
            node = node.left if bit == "0" else node.right
            if node is None:
                raise MalformedBitStringError(f"Bit {position} does not lead to a node of the tree")
            if node.is_leaf:
                symbols.append(node.symbol)
                node = root
                if self.logger is not None:
                    self.logger.log(CodingProgressStep("Decoding symbols"))
        if node is not root:
            raise MalformedBitStringError(
                f"Bit string ended in the middle of a code ({len(bits) - path_start} trailing bits)")
        if self.logger is not None:
            self.logger.log(CodingLog(len(symbols), len(bits)))
        return symbols

    def _decode_single_leaf(self, bits: str, leaf: HuffmanNode) -> List[Symbol]:
        for position, bit in enumerate(bits):
            if bit != "0":
                raise MalformedBitStringError(f"Bit {position} does not lead to a node of the tree")
        return [leaf.symbol] * len(bits)


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def flush_current_byte(self) -> None:
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        return (self.current_byte >> self.num_bits_remaining) & 1


def pack_bit_string(bits: str) -> bytes:
    """
    Pack a '0'/'1' string into bytes, most significant bit first, zero padded.
    """
    validate_bit_string(bits)
    out_buffer = BytesIO()
    bit_out = BitOutputStream(out_buffer)
    for bit in bits:
        bit_out.write(1 if bit == "1" else 0)
    bit_out.finish()
    return out_buffer.getvalue()


def unpack_bit_string(data: bytes, bit_length: int) -> str:
    """
    Unpack the first bit_length bits of data into a '0'/'1' string.

    Raises:
        ValueError: If data holds fewer than bit_length bits.
    """
    validate_type(data, "Data", bytes)
    validate_type(bit_length, "Bit length", int)
    if bit_length < 0 or bit_length > len(data) * 8:
        raise ValueError(f"Bit length {bit_length} does not fit in {len(data)} bytes")
    bit_in = BitInputStream(BytesIO(data))
    return "".join(str(bit_in.read()) for _ in range(bit_length))
