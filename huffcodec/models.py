"""
models.py

The shared objects used in huffcodec.

"""


import numpy as np
from typing import Iterator, List, Dict, Optional

from .settings import ALPH_SIZE, PSEUDO_EOF


class HuffNode:
    """
    Base for the two node variants of a Huffman tree.
    """
    def __init__(self, weight: int) -> None:
        self.weight: int = weight


class HuffLeaf(HuffNode):
    """
    A leaf holding one symbol value (0..PSEUDO_EOF).
    """
    def __init__(self, value: int, weight: int = 0) -> None:
        super().__init__(weight)
        self.value: int = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HuffLeaf) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("leaf", self.value))

    def __repr__(self) -> str:
        return f"HuffLeaf({self.value})"


class HuffInternal(HuffNode):
    """
    An internal node. It always owns exactly two children.
    """
    def __init__(self, left: HuffNode, right: HuffNode, weight: Optional[int] = None) -> None:
        if not isinstance(left, HuffNode) or not isinstance(right, HuffNode):
            raise ValueError("Internal nodes must have two child nodes")
        super().__init__(left.weight + right.weight if weight is None else weight)
        self.left: HuffNode = left
        self.right: HuffNode = right

    def __eq__(self, other: object) -> bool:
        # weights are construction-time only, decoded trees carry zeros
        return isinstance(other, HuffInternal) and self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash(("internal", hash(self.left), hash(self.right)))

    def __repr__(self) -> str:
        return f"HuffInternal({self.left!r}, {self.right!r})"


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: int, frequency: int) -> None:
        self.symbol: int = symbol
        self.frequency: int = frequency

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class FrequencyTable:
    """
    Occurrence counts for the 256 byte values plus PSEUDO_EOF, whose count is always 1.
    """
    def __init__(self) -> None:
        self.counts: np.ndarray = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
        self.counts[PSEUDO_EOF] = 1

    def update(self, chunk: bytes) -> None:
        """
        Add the byte values of a chunk of input to the table.

        Args:
            chunk (bytes): A slice of the input stream.
        """
        if not chunk:
            return
        values = np.frombuffer(chunk, dtype=np.uint8)
        self.counts[:ALPH_SIZE] += np.bincount(values, minlength=ALPH_SIZE)

    def __getitem__(self, symbol: int) -> int:
        return int(self.counts[symbol])

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[SymbolFrequency]:
        for symbol in self.get_symbols():
            yield SymbolFrequency(symbol, self[symbol])

    def get_symbols(self) -> List[int]:
        """
        Symbols with a non-zero count, in ascending order. PSEUDO_EOF is always last.
        """
        return [int(s) for s in np.flatnonzero(self.counts)]

    def get_size(self) -> int:
        """Number of distinct symbols present, PSEUDO_EOF included."""
        return int(np.count_nonzero(self.counts))

    def get_total(self) -> int:
        """Number of input bytes counted."""
        return int(self.counts[:ALPH_SIZE].sum())


CodeTable = Dict[int, str]


class CompressionResult:
    """
    Sizes observed during one compress or decompress run.
    """
    def __init__(self, original_size: int, compressed_size: int, header_bits: int) -> None:
        self.original_size: int = original_size
        self.compressed_size: int = compressed_size
        self.header_bits: int = header_bits

    @property
    def ratio(self) -> float:
        """Original size over compressed size."""
        if self.compressed_size == 0:
            return 0.0
        return self.original_size / self.compressed_size

    def __repr__(self) -> str:
        return (f"CompressionResult(original_size={self.original_size}, "
                f"compressed_size={self.compressed_size}, header_bits={self.header_bits})")
