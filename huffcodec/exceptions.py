"""
exceptions.py

Errors raised by the huffcodec core.
"""


class HuffmanError(ValueError):
    """Base class for Huffman coding errors."""
    pass


class SymbolNotInCodeTableError(HuffmanError):
    """Raised when encoding a symbol that has no code assigned."""

    def __init__(self, symbol, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol not in code table: {symbol!r} (position {position})")


class MalformedBitStringError(HuffmanError):
    """Raised when a bit string does not resolve cleanly to leaves of the tree."""
    pass
