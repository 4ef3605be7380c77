from typing import Dict, List, Optional, Sequence, Union

from .coders import HuffmanDecoder, HuffmanEncoder, generate_codes
from .exceptions import HuffmanError
from .logger import Logger, Log, LogLevel, FrequencyTableLog
from .models import FrequencyTable, Symbol, count_frequencies
from .preprocessors import BasePreprocessor, TextPreprocessor
from .tree import HuffmanNode, build_tree
from .validators import validate_type


class CompressionSession:
    """
    The tree, code table and frequency table built for one input.

    A session is immutable; the table accessors return owned copies.
    """

    __slots__ = ("_root", "_code_table", "_frequency_table")

    def __init__(self, root: HuffmanNode, code_table: Dict[Symbol, str], frequency_table: FrequencyTable) -> None:
        validate_type(root, "Root", HuffmanNode)
        validate_type(code_table, "Code table", dict)
        validate_type(frequency_table, "Frequency table", FrequencyTable)
        self._root = root
        self._code_table = dict(code_table)
        self._frequency_table = frequency_table.copy()

    @property
    def root(self) -> HuffmanNode:
        return self._root

    def get_code_table(self) -> Dict[Symbol, str]:
        return dict(self._code_table)

    def get_frequency_table(self) -> FrequencyTable:
        return self._frequency_table.copy()

    def encode(self, symbols: Sequence[Symbol], logger: Optional[Logger] = None) -> str:
        return HuffmanEncoder(logger).encode(symbols, self._code_table)

    def decode(self, bits: str, logger: Optional[Logger] = None) -> List[Symbol]:
        return HuffmanDecoder(logger).decode(bits, self._root)

    def encoded_length(self) -> int:
        """
        Get the number of bits needed to encode the input this session was built from.
        """
        return sum(count * len(self._code_table[symbol]) for symbol, count in self._frequency_table.items())


def build_session(symbols: Sequence[Symbol],
                  logger: Optional[Logger] = None,
                  frequency_table: Optional[FrequencyTable] = None) -> CompressionSession:
    """
    Count the symbols, build their Huffman tree and assign their codes.

    Args:
        symbols (Sequence[Symbol]): A non-empty sequence of symbols.
        logger (Optional[Logger]): An optional logger.
        frequency_table (Optional[FrequencyTable]): The counts of symbols if already known.

    Returns:
        CompressionSession: The session for this input.

    Raises:
        ValueError: If symbols is empty.
    """
    if frequency_table is None:
        frequency_table = count_frequencies(symbols)
    if logger is not None:
        logger.log(FrequencyTableLog(frequency_table.get_size(), frequency_table.total()))
    root = build_tree(frequency_table, logger)
    code_table = generate_codes(root, logger)
    return CompressionSession(root, code_table, frequency_table)


class HuffmanCompressor:
    """
    Compresses data into a '0'/'1' bit string and back.

    The compressor keeps the session of the last compressed input so that its
    tree and tables can be inspected and the bit string decompressed. It is
    not meant to be shared between threads.
    """

    def __init__(self, preprocessor: Optional[BasePreprocessor] = None, logger: Optional[Logger] = None) -> None:
        if preprocessor is None:
            preprocessor = TextPreprocessor(logger)
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")
        self.preprocessor: BasePreprocessor = preprocessor
        self.logger: Optional[Logger] = logger
        self._session: Optional[CompressionSession] = None

    def compress(self, data: Union[str, bytes]) -> str:
        """
        Compress the input data.

        Args:
            data: The data to compress, of the type handled by the preprocessor.

        Returns:
            str: The encoded bit string, empty for empty input.
        """
        symbols, frequency_table = self.preprocessor.convert_to_symbols(data)
        if not symbols:
            return ""
        self._session = build_session(symbols, self.logger, frequency_table)
        return self._session.encode(symbols, self.logger)

    def decompress(self, bit_string: str) -> Union[str, bytes]:
        """
        Decompress a bit string produced by the last compress call.

        Args:
            bit_string (str): The encoded bit string.

        Returns:
            The decoded data, empty if the input is empty or nothing was compressed yet.

        Raises:
            MalformedBitStringError: If the bit string does not decode cleanly.
        """
        validate_type(bit_string, "Bit string", str)
        if not bit_string or self._session is None:
            return self.preprocessor.empty
        try:
            symbols = self._session.decode(bit_string, self.logger)
        except HuffmanError as e:
            if self.logger is not None:
                self.logger.log(Log("Decompression_error", LogLevel.ERROR, str(e)))
            raise
        return self.preprocessor.convert_from_symbols(symbols)

    def get_code_table(self) -> Dict[Symbol, str]:
        if self._session is None:
            return {}
        return self._session.get_code_table()

    def get_frequency_table(self) -> Dict[Symbol, int]:
        if self._session is None:
            return {}
        return self._session.get_frequency_table().to_dict()

    def get_tree_root(self) -> Optional[HuffmanNode]:
        if self._session is None:
            return None
        return self._session.root

    def get_session(self) -> Optional[CompressionSession]:
        return self._session

    def reset(self) -> None:
        self._session = None
