"""
coders.py

Bit-granular streams over byte-oriented binary files. Bits are packed
MSB first; the final partial byte is padded with zero bits.

"""


from typing import IO

from .settings import BITS_PER_INT
from .validators import validate_bit_count


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
        self.bits_written: int = 0
        self.closed: bool = False

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
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_bits(self, count: int, value: int) -> None:
        """
        Write the low `count` bits of value, most significant first.

        Args:
            count (int): Number of bits to write (1..32).
            value (int): The value holding the bits.
        """
        validate_bit_count(count, BITS_PER_INT)
        if value < 0:
            raise ValueError("Value must be non-negative")
        for shift in range(count - 1, -1, -1):
            self.write((value >> shift) & 1)

    def write_code(self, code: str) -> None:
        """
        Write a code given as a string of '0' and '1' characters.
        """
        for char in code:
            self.write(1 if char == '1' else 0)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
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

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        if self.closed:
            return
        self.closed = True
        try:
            self.finish()
        finally:
            self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0

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
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def read_bits(self, count: int) -> int:
        """
        Read `count` bits as an unsigned integer, most significant first.

        Args:
            count (int): Number of bits to read (1..32).

        Returns:
            int: The value read, or -1 if the stream ends before `count` bits are available.
        """
        validate_bit_count(count, BITS_PER_INT)
        value = 0
        for _ in range(count):
            bit = self.read()
            if bit == -1:
                return -1
            value = (value << 1) | bit
        return value

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()
