import abc
from typing import List, Tuple, Optional, Union

from .models import Symbol, FrequencyTable, count_frequencies
from .logger import Logger, PreprocessingProgressStep
from .settings import TEXT_PREPROCESSOR_CODE, BYTE_PREPROCESSOR_CODE


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @property
    @abc.abstractmethod
    def empty(self) -> Union[str, bytes]:
        """Return the empty value of the data type handled by the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: Union[str, bytes]) -> Tuple[List[Symbol], FrequencyTable]:
        """
        Convert raw data to a list of symbols and count their frequencies.

        Args:
            data: The input data.

        Returns:
            Tuple[List[Symbol], FrequencyTable]: The symbols in input order and their frequency table.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Symbol]) -> Union[str, bytes]:
        """
        Convert a list of symbols back to data.

        Args:
            symbols (List[Symbol]): The list of symbols.

        Returns:
            The reconstructed data.
        """
        pass

    def construct_frequency_table_from_symbols(self, symbols: List[Symbol]) -> FrequencyTable:
        return count_frequencies(symbols)


class TextPreprocessor(BasePreprocessor):
    """
    Text Preprocessor: Each character of a string is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return TEXT_PREPROCESSOR_CODE

    @property
    def empty(self) -> str:
        return ""

    def convert_to_symbols(self, data: str) -> Tuple[List[Symbol], FrequencyTable]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")

        symbols: List[Symbol] = []
        cache = {}
        if self.logger is not None:
            self.logger.reset_progress(PreprocessingProgressStep)
        for char in data:
            if char not in cache:
                cache[char] = Symbol(char)
            symbols.append(cache[char])
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting text to symbols", len(data)))

        return symbols, self.construct_frequency_table_from_symbols(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        for symbol in symbols:
            if not isinstance(symbol.data, str):
                raise ValueError(f"Symbol {symbol!r} is not a text symbol")
        return "".join(symbol.data for symbol in symbols)


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return BYTE_PREPROCESSOR_CODE

    @property
    def empty(self) -> bytes:
        return b""

    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], FrequencyTable]:
        if not isinstance(data, (bytes, bytearray)):
            raise ValueError("Data should be in form of bytes")

        symbols: List[Symbol] = []
        cache = {}
        if self.logger is not None:
            self.logger.reset_progress(PreprocessingProgressStep)
        for b in data:
            if b not in cache:
                cache[b] = Symbol(bytes([b]))
            symbols.append(cache[b])
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting data to symbols", len(data)))

        return symbols, self.construct_frequency_table_from_symbols(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        for symbol in symbols:
            if not isinstance(symbol.data, bytes):
                raise ValueError(f"Symbol {symbol!r} is not a byte symbol")
        return b"".join(symbol.data for symbol in symbols)


def get_preprocessor(code: int, logger: Optional[Logger] = None) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == TEXT_PREPROCESSOR_CODE:
        return TextPreprocessor(logger)
    elif code == BYTE_PREPROCESSOR_CODE:
        return BytePreprocessor(logger)
    else:
        raise ValueError("Preprocessor code not supported")
