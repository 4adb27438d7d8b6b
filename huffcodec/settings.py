"""
settings.py

Format constants shared across huffcodec.
"""

from enum import Enum

VERSION = 1

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE

# leaf values carry one extra bit so PSEUDO_EOF fits
LEAF_VALUE_BITS = BITS_PER_WORD + 1

HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4

READ_CHUNK_SIZE = 1 << 16

# decoded output beyond this size is spooled to disk until decoding succeeds
SPOOL_MAX_SIZE = 1 << 24


class HeaderType(Enum):
    TREE_HEADER = HUFF_TREE
    COUNT_HEADER = HUFF_NUMBER
