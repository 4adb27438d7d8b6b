import os
import shutil
from io import BytesIO
from tempfile import SpooledTemporaryFile
from typing import IO, Optional

from .coders import BitInputStream, BitOutputStream
from .errors import FormatError
from .huffman import (
    build_tree,
    count_frequencies,
    count_leaves,
    make_codes,
    read_tree_header,
    tree_depth,
    write_tree_header,
)
from .logger import (
    CodingLog,
    CodingProgressStep,
    EncodedSymbolLog,
    FrequencyLog,
    HeaderLog,
    Logger,
    TreeLog,
)
from .models import CodeTable, CompressionResult, HuffLeaf
from .settings import (
    BITS_PER_INT,
    BITS_PER_WORD,
    DEBUG_HIGH,
    DEBUG_LOW,
    HeaderType,
    HUFF_TREE,
    PSEUDO_EOF,
    READ_CHUNK_SIZE,
    SPOOL_MAX_SIZE,
)
from .validators import validate_distinct_files, validate_file_exists, validate_type


class HuffProcessor:
    """
    Stream-level Huffman compressor and decompressor.

    The processor never closes the streams it is given; whoever opened them
    closes them. The bit output is finished (padded and flushed) on success.
    """

    def __init__(self, debug: int = 0, logger: Optional[Logger] = None) -> None:
        validate_type(debug, "Debug level", int)
        self.debug: int = debug
        self.logger: Optional[Logger] = logger

    def _log(self, log, level: int = 0) -> None:
        if self.logger is not None and self.debug >= level:
            self.logger.log(log)

    @staticmethod
    def _rewindable(inp: IO[bytes]) -> IO[bytes]:
        seekable = getattr(inp, "seekable", None)
        if seekable is not None and seekable():
            return inp
        return BytesIO(inp.read())

    def compress(self, inp: IO[bytes], out: BitOutputStream) -> CompressionResult:
        """
        Compress a byte stream into a bit stream.

        The input is read twice: once to count frequencies, once to encode.
        Non-seekable inputs are buffered in memory first.

        Args:
            inp (IO[bytes]): Binary input stream, read from its current position.
            out (BitOutputStream): Destination of the compressed bits.

        Returns:
            CompressionResult: Sizes of the run.
        """
        validate_type(out, "Output", BitOutputStream)
        source = self._rewindable(inp)
        start = source.tell()
        start_bits = out.bits_written

        freqs = count_frequencies(source)
        self._log(FrequencyLog(freqs.get_size(), freqs.get_total()))

        root = build_tree(freqs)
        codes = make_codes(root)
        self._log(TreeLog(count_leaves(root), tree_depth(root)))
        for symbol in sorted(codes):
            self._log(EncodedSymbolLog(symbol, codes[symbol]), DEBUG_HIGH)

        out.write_bits(BITS_PER_INT, HUFF_TREE)
        header_bits = write_tree_header(root, out)
        self._log(HeaderLog(header_bits))

        source.seek(start)
        self._write_codes(source, codes, out, freqs.get_total())
        out.write_code(codes[PSEUDO_EOF])
        out.finish()

        original_size = freqs.get_total()
        compressed_size = (out.bits_written - start_bits + 7) // 8
        self._log(CodingLog(original_size * BITS_PER_WORD, out.bits_written - start_bits))
        return CompressionResult(original_size, compressed_size, header_bits)

    def _write_codes(self, source: IO[bytes], codes: CodeTable, out: BitOutputStream, total: int) -> None:
        total_chunks = (total + READ_CHUNK_SIZE - 1) // READ_CHUNK_SIZE
        while True:
            chunk = source.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            out.write_code(''.join(codes[byte] for byte in chunk))
            self._log(CodingProgressStep("Encoding", total_chunks), DEBUG_LOW)

    def decompress(self, inp: BitInputStream, out: IO[bytes]) -> CompressionResult:
        """
        Decompress a bit stream produced by compress.

        Args:
            inp (BitInputStream): Source of the compressed bits.
            out (IO[bytes]): Binary output stream.

        Returns:
            CompressionResult: Sizes of the run.

        Raises:
            FormatError: On a wrong magic number, a bad tree header, or data
                that ends before PSEUDO_EOF.
        """
        validate_type(inp, "Input", BitInputStream)
        start_bits = inp.bits_read

        magic = inp.read_bits(BITS_PER_INT)
        if magic not in {header.value for header in HeaderType}:
            found = "end of stream" if magic == -1 else hex(magic)
            raise FormatError("Wrong huff number", expected=hex(HUFF_TREE), found=found)

        root = read_tree_header(inp)
        header_bits = inp.bits_read - start_bits - BITS_PER_INT
        self._log(HeaderLog(header_bits))
        self._log(TreeLog(count_leaves(root), tree_depth(root)))

        # decoded bytes are held back until PSEUDO_EOF so a failed run writes nothing
        buffer = bytearray()
        written = 0
        current = root
        with SpooledTemporaryFile(max_size=SPOOL_MAX_SIZE) as spool:
            while True:
                bit = inp.read()
                if bit == -1:
                    raise FormatError("Bad input, no PSEUDO_EOF", expected="PSEUDO_EOF code", found="end of stream")
                current = current.right if bit else current.left
                if isinstance(current, HuffLeaf):
                    if current.value == PSEUDO_EOF:
                        break
                    buffer.append(current.value)
                    current = root
                    if len(buffer) >= READ_CHUNK_SIZE:
                        spool.write(buffer)
                        written += len(buffer)
                        buffer.clear()
                        self._log(CodingProgressStep("Decoding"), DEBUG_LOW)
            spool.write(buffer)
            written += len(buffer)
            spool.seek(0)
            shutil.copyfileobj(spool, out)
        out.flush()

        compressed_size = (inp.bits_read - start_bits + 7) // 8
        self._log(CodingLog(written * BITS_PER_WORD, inp.bits_read - start_bits))
        return CompressionResult(written, compressed_size, header_bits)


class HuffCodec:
    """In-memory compression: bytes in, bytes out."""

    def __init__(self, debug: int = 0) -> None:
        validate_type(debug, "Debug level", int)
        self.debug = debug
        self.last_result: Optional[CompressionResult] = None

    def compress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            bytes: The compressed data. The run statistics are kept in last_result.
        """
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        self.last_result = HuffProcessor(self.debug, logger).compress(BytesIO(data), BitOutputStream(out_buffer))
        return out_buffer.getvalue()

    def decompress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Decompress the encoded data. Nothing is returned unless the whole
        stream decodes up to PSEUDO_EOF.

        Args:
            data (bytes): The compressed data.
            logger: Logger instance for logging.

        Returns:
            bytes: The decompressed data.
        """
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        self.last_result = HuffProcessor(self.debug, logger).decompress(BitInputStream(BytesIO(data)), out_buffer)
        return out_buffer.getvalue()


def _remove_partial(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)


class HuffCodecFile(HuffCodec):
    """File compression: reads one path, writes another."""

    def compress(self, input_path: str, output_path: str, logger: Optional[Logger] = None) -> CompressionResult:
        """
        Compress the input file and write the result to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)
        validate_distinct_files(input_path, output_path)

        try:
            with open(input_path, "rb") as inp, open(output_path, "wb") as out:
                return HuffProcessor(self.debug, logger).compress(inp, BitOutputStream(out))
        except Exception:
            _remove_partial(output_path)
            raise

    def decompress(self, compressed_file_path: str, output_file_path: str,
                   logger: Optional[Logger] = None) -> CompressionResult:
        """
        Decompress the input file and write the decompressed data to an output file.
        The output file is removed if decompression fails.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)
        validate_distinct_files(compressed_file_path, output_file_path)

        try:
            with open(compressed_file_path, "rb") as inp, open(output_file_path, "wb") as out:
                return HuffProcessor(self.debug, logger).decompress(BitInputStream(inp), out)
        except Exception:
            _remove_partial(output_file_path)
            raise
