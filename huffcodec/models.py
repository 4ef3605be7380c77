"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Dict, Iterable, Iterator, List, Optional, Union

_DISPLAY_NAMES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    " ": "SPACE",
}


class Symbol:
    """
    Represents a single symbol in the data: one character or one byte.
    """
    def __init__(self, data: Union[str, bytes]) -> None:
        if not isinstance(data, (str, bytes)):
            raise ValueError("Data must be of type str or bytes")
        if len(data) != 1:
            raise ValueError("Data must hold exactly one character or byte")
        self.data: Union[str, bytes] = data

    def display(self) -> str:
        """
        Get a printable form of the symbol for tables and trees.

        Returns:
            str: The character, an escape for whitespace, or a hex value for bytes.
        """
        if isinstance(self.data, bytes):
            return f"0x{self.data[0]:02X}"
        return _DISPLAY_NAMES.get(self.data, self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __lt__(self, other: "Symbol") -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        if type(self.data) is not type(other.data):
            return isinstance(self.data, bytes)
        return self.data < other.data

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"Symbol({self.data!r})"

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol.display()}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class FrequencyTable:
    """
    Represents the occurrence count of every unique symbol found in the data.

    Symbols keep the order in which they were first added.
    """
    def __init__(self) -> None:
        self._counts: Dict[Symbol, int] = {}
        self._total: int = 0

    def add(self, symbol: Symbol, count: int = 1) -> bool:
        """
        Add occurrences of a symbol to the table.

        Args:
            symbol (Symbol): The symbol to count.
            count (int): Number of occurrences to add.

        Returns:
            bool: True if the symbol was already present; False if added.
        """
        if not isinstance(symbol, Symbol):
            raise ValueError("Only Symbol instances can be counted")
        if count < 0:
            raise ValueError("Count must be non-negative")
        present = symbol in self._counts
        self._counts[symbol] = self._counts.get(symbol, 0) + count
        self._total += count
        return present

    def add_multiple(self, symbols: Iterable[Symbol]) -> int:
        """
        Add one occurrence for each of the given symbols.

        Args:
            symbols (Iterable[Symbol]): Iterable of symbols to add.

        Returns:
            int: Count of symbols that were already present.
        """
        count = 0
        for symbol in symbols:
            if self.add(symbol):
                count += 1
        return count

    def get_frequency(self, symbol: Symbol) -> int:
        """
        Get the number of occurrences of a symbol, zero if absent.
        """
        return self._counts.get(symbol, 0)

    def get_size(self) -> int:
        """
        Get the number of unique symbols in the table.

        Returns:
            int: Number of symbols.
        """
        return len(self._counts)

    def total(self) -> int:
        """
        Get the sum of all counts, which equals the length of the counted input.
        """
        return self._total

    def contains(self, symbol: Symbol) -> bool:
        return symbol in self._counts

    def most_common(self, n: Optional[int] = None) -> List[SymbolFrequency]:
        """
        List symbols by descending frequency, ties kept in insertion order.

        Args:
            n (Optional[int]): Maximum number of entries to return; all if None.

        Returns:
            List[SymbolFrequency]: The symbols with their frequencies.
        """
        ordered = sorted(self._counts.items(), key=lambda item: -item[1])
        if n is not None:
            ordered = ordered[:n]
        return [SymbolFrequency(symbol, frequency) for symbol, frequency in ordered]

    def to_dict(self) -> Dict[Symbol, int]:
        """
        Get an owned copy of the symbol to count mapping.
        """
        return dict(self._counts)

    def copy(self) -> "FrequencyTable":
        table = FrequencyTable()
        for symbol, count in self._counts.items():
            table.add(symbol, count)
        return table

    def items(self):
        return self._counts.items()

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._counts))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._counts

    def __eq__(self, other: object) -> bool:
        """
        Compare this table with another for equality, ignoring insertion order.
        """
        if not isinstance(other, FrequencyTable):
            return False
        return self._counts == other._counts

    def __repr__(self) -> str:
        entries = ", ".join(f"{symbol.display()}: {count}" for symbol, count in self._counts.items())
        return f"FrequencyTable({{{entries}}})"


def count_frequencies(symbols: Iterable[Symbol]) -> FrequencyTable:
    """
    Count the occurrences of every symbol in a sequence.

    Args:
        symbols (Iterable[Symbol]): The symbols to count, possibly empty.

    Returns:
        FrequencyTable: The table of counts, empty for empty input.
    """
    table = FrequencyTable()
    table.add_multiple(symbols)
    return table
