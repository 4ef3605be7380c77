"""
huffcodec: A Python library for Huffman coding of text and byte streams.
"""

from .codecs import (
    CompressionSession,
    HuffmanCompressor,
    build_session,
)

from .coders import (
    HuffmanEncoder,
    HuffmanDecoder,
    BitOutputStream,
    BitInputStream,
    generate_codes,
    pack_bit_string,
    unpack_bit_string,
)

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyTable,
    count_frequencies,
)

from .tree import (
    HuffmanNode,
    build_tree,
)

from .preprocessors import (
    BasePreprocessor,
    TextPreprocessor,
    BytePreprocessor,
    get_preprocessor,
)

from .exceptions import (
    HuffmanError,
    SymbolNotInCodeTableError,
    MalformedBitStringError,
)

from .statistics import (
    CompressionResult,
    shannon_entropy,
    average_code_length,
    coding_efficiency,
)

from .settings import VERSION

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyTableLog,
    TreeConstructionLog,
    CodeAssignmentLog,
    CodingLog,
    PreprocessingProgressStep,
    TreeConstructionProgressStep,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "CompressionSession",
    "HuffmanCompressor",
    "build_session",

    "HuffmanEncoder",
    "HuffmanDecoder",
    "BitOutputStream",
    "BitInputStream",
    "generate_codes",
    "pack_bit_string",
    "unpack_bit_string",

    "Symbol",
    "SymbolFrequency",
    "FrequencyTable",
    "count_frequencies",

    "HuffmanNode",
    "build_tree",

    "BasePreprocessor",
    "TextPreprocessor",
    "BytePreprocessor",
    "get_preprocessor",

    "HuffmanError",
    "SymbolNotInCodeTableError",
    "MalformedBitStringError",

    "CompressionResult",
    "shannon_entropy",
    "average_code_length",
    "coding_efficiency",

    "Logger",
    "Log",
    "LogLevel",
]
