"""
huffcodec: A Python library for lossless Huffman compression and decompression.
"""

from .codecs import (
    HuffProcessor,
    HuffCodec,
    HuffCodecFile,
)

from .coders import (
    BitOutputStream,
    BitInputStream,
)

from .huffman import (
    count_frequencies,
    build_tree,
    make_codes,
    write_tree_header,
    read_tree_header,
)

from .models import (
    HuffNode,
    HuffLeaf,
    HuffInternal,
    SymbolFrequency,
    FrequencyTable,
    CompressionResult,
)

from .errors import FormatError

from .settings import (
    VERSION,
    BITS_PER_WORD,
    BITS_PER_INT,
    ALPH_SIZE,
    PSEUDO_EOF,
    HUFF_NUMBER,
    HUFF_TREE,
    DEBUG_LOW,
    DEBUG_HIGH,
    HeaderType,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyLog,
    TreeLog,
    HeaderLog,
    CodingLog,
    EncodedSymbolLog,
    CodingProgressStep,
)

from .validators import *

__all__ = [

    "HuffProcessor",
    "HuffCodec",
    "HuffCodecFile",

    "BitOutputStream",
    "BitInputStream",

    "count_frequencies",
    "build_tree",
    "make_codes",
    "write_tree_header",
    "read_tree_header",

    "HuffNode",
    "HuffLeaf",
    "HuffInternal",
    "SymbolFrequency",
    "FrequencyTable",
    "CompressionResult",

    "FormatError",

    "VERSION",
    "BITS_PER_WORD",
    "BITS_PER_INT",
    "ALPH_SIZE",
    "PSEUDO_EOF",
    "HUFF_NUMBER",
    "HUFF_TREE",
    "DEBUG_LOW",
    "DEBUG_HIGH",
    "HeaderType",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyLog",
    "TreeLog",
    "HeaderLog",
    "CodingLog",
    "EncodedSymbolLog",
    "CodingProgressStep",
]
