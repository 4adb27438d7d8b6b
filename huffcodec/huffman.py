# huffman.py

import heapq
from typing import IO, List, Tuple

from .coders import BitInputStream, BitOutputStream
from .errors import FormatError
from .models import CodeTable, FrequencyTable, HuffInternal, HuffLeaf, HuffNode
from .settings import ALPH_SIZE, LEAF_VALUE_BITS, PSEUDO_EOF, READ_CHUNK_SIZE


def count_frequencies(inp: IO[bytes], chunk_size: int = READ_CHUNK_SIZE) -> FrequencyTable:
    """
    Count every byte of the stream from its current position to the end.

    Args:
        inp (IO[bytes]): Binary input stream.
        chunk_size (int): Number of bytes read per call.

    Returns:
        FrequencyTable: Counts for all 256 byte values, PSEUDO_EOF fixed at 1.
    """
    freqs = FrequencyTable()
    while True:
        chunk = inp.read(chunk_size)
        if not chunk:
            break
        freqs.update(chunk)
    return freqs


def build_tree(freqs: FrequencyTable) -> HuffNode:
    """
    Build a Huffman tree from a frequency table.

    The heap is keyed on (weight, sequence). Leaves get sequence numbers in
    ascending symbol order and every merged node takes the next one, so among
    equal weights the earliest inserted node is popped first. The first node
    popped becomes the left child.

    Args:
        freqs (FrequencyTable): Symbol counts.

    Returns:
        HuffNode: The root, always an internal node.
    """
    heap: List[Tuple[int, int, HuffNode]] = []
    sequence = 0
    for symbol in freqs.get_symbols():
        heap.append((freqs[symbol], sequence, HuffLeaf(symbol, freqs[symbol])))
        sequence += 1
    heapq.heapify(heap)

    if len(heap) == 1:
        # empty input: only PSEUDO_EOF is present, give it a sibling so its code is "1"
        _, _, only = heap[0]
        return HuffInternal(HuffLeaf(0, 0), only)

    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        merged = HuffInternal(left, right, left_weight + right_weight)
        heapq.heappush(heap, (merged.weight, sequence, merged))
        sequence += 1

    return heap[0][2]


def make_codes(root: HuffNode) -> CodeTable:
    """
    Walk the tree and map each leaf symbol to its path: '0' for left, '1' for right.
    """
    if isinstance(root, HuffLeaf):
        raise ValueError("A single leaf has no code; the root must be an internal node")
    codes: CodeTable = {}

    def build_codes(node: HuffNode, path: str) -> None:
        if isinstance(node, HuffLeaf):
            codes[node.value] = path
        else:
            build_codes(node.left, path + '0')
            build_codes(node.right, path + '1')

    build_codes(root, '')
    return codes


def tree_depth(node: HuffNode) -> int:
    if isinstance(node, HuffLeaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))


def count_leaves(node: HuffNode) -> int:
    if isinstance(node, HuffLeaf):
        return 1
    return count_leaves(node.left) + count_leaves(node.right)


def write_tree_header(root: HuffNode, out: BitOutputStream) -> int:
    """
    Serialize the tree in pre-order: 0 for an internal node followed by both
    subtrees, 1 for a leaf followed by its 9-bit value.

    Returns:
        int: Number of bits written.
    """
    start = out.bits_written

    def write_node(node: HuffNode) -> None:
        if isinstance(node, HuffLeaf):
            out.write(1)
            out.write_bits(LEAF_VALUE_BITS, node.value)
        else:
            out.write(0)
            write_node(node.left)
            write_node(node.right)

    write_node(root)
    return out.bits_written - start


def read_tree_header(inp: BitInputStream) -> HuffNode:
    """
    Rebuild a tree written by write_tree_header.

    Raises:
        FormatError: If the header is truncated, nests deeper than the
            alphabet allows, holds an out-of-range leaf value, or is a bare leaf.
    """

    def read_node(depth: int) -> HuffNode:
        if depth > ALPH_SIZE:
            raise FormatError("Tree header nests too deep", expected=f"depth <= {ALPH_SIZE}", found=depth)
        bit = inp.read()
        if bit == -1:
            raise FormatError("Tree header truncated", expected="tree node bit", found="end of stream")
        if bit == 0:
            left = read_node(depth + 1)
            right = read_node(depth + 1)
            return HuffInternal(left, right, 0)
        value = inp.read_bits(LEAF_VALUE_BITS)
        if value == -1:
            raise FormatError("Tree header truncated", expected=f"{LEAF_VALUE_BITS}-bit leaf value", found="end of stream")
        if value > PSEUDO_EOF:
            raise FormatError("Leaf value out of range", expected=f"<= {PSEUDO_EOF}", found=value)
        return HuffLeaf(value)

    root = read_node(0)
    if isinstance(root, HuffLeaf):
        raise FormatError("Tree header has no internal root", expected="internal node", found=root)
    return root
