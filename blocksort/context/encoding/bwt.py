"""
Burrows-Wheeler Transform (BWT)

The BWT is a block-sorting transform that rearranges data to improve
compression. It groups bytes that share a following context together
without losing information, which gives a downstream entropy coder long
runs and skewed statistics to work with.

Algorithm:
1. Block-sort: sort all circular rotations of the input
2. Extract last column: the last byte of each sorted rotation
3. Store: the rank of the original (offset 0) rotation for reconstruction

Wire format:
    [first_index: 4 bytes, big-endian][last_column: N bytes]

N is not stored; the decoder reads the last column until end of input.
"""

import logging
from collections import deque
from io import BytesIO
from typing import Dict, List, Tuple

from blocksort.context.encoding.suffix_array import CircularSuffixArray
from blocksort.context.io import BinaryIn, BinaryOut
from blocksort.errors import CorruptedInputError, InvalidArgumentError
from blocksort.models import BWTBlock
from blocksort.protocols import TransformProtocol

logger = logging.getLogger(__name__)


def encode_block(block: bytes, algorithm: str = 'doubling') -> BWTBlock:
    """
    Forward transform of a single in-memory block

    Args:
        block: Non-empty input block
        algorithm: Suffix sort strategy ('doubling' or 'naive')

    Returns:
        BWTBlock with the first index and last column
    """
    csa = CircularSuffixArray(block, algorithm=algorithm)
    block = csa.block
    n = csa.length()

    first = 0
    last_column = bytearray(n)
    for rank in range(n):
        off = csa.index(rank)
        if off == 0:
            first = rank
            last_column[rank] = block[n - 1]
        else:
            last_column[rank] = block[off - 1]

    return BWTBlock(first=first, last_column=bytes(last_column))


def _next_permutation(last_column: bytes) -> Tuple[bytes, List[int]]:
    """
    Build the sorted first column and the next permutation

    Positions of each byte value in the last column are queued in
    left-to-right order; walking the sorted first column in ascending
    order dequeues one position per entry.
    """
    count = [0] * 256
    positions: Dict[int, deque] = {}
    for i, b in enumerate(last_column):
        count[b] += 1
        positions.setdefault(b, deque()).append(i)

    first_column = bytearray()
    for value in range(256):
        if count[value]:
            first_column.extend(bytes([value]) * count[value])

    nxt = [positions[b].popleft() for b in first_column]
    return bytes(first_column), nxt


def _check_cycle(first: int, nxt: List[int], last_column: bytes) -> None:
    """
    Fail closed unless walking `nxt` from `first` reconstructs a block

    A full N-cycle is always valid. A shorter cycle of length c is valid
    only for a periodic block u^(N/c), whose last column is constant on
    each of its c runs of length N/c.
    """
    n = len(nxt)
    cycle = 1
    cursor = nxt[first]
    while cursor != first:
        cycle += 1
        cursor = nxt[cursor]

    if cycle == n:
        return
    if n % cycle:
        raise CorruptedInputError(
            f"Last column does not encode a single block: cycle of {cycle} in {n} positions"
        )

    run = n // cycle
    for start in range(0, n, run):
        segment = last_column[start:start + run]
        if segment.count(segment[0]) != run:
            raise CorruptedInputError(
                f"Last column does not encode a periodic block: "
                f"cycle of {cycle}, run at {start} is not constant"
            )
    logger.debug("Periodic block: period %d repeated %d times", cycle, run)


def decode_block(first: int, last_column: bytes, strict: bool = True) -> bytes:
    """
    Inverse transform of a single block via the next permutation

    Args:
        first: Rank of the original rotation
        last_column: BWT last column, length N >= 1
        strict: Reject a last column that does not reconstruct a
            consistent block; False decodes without checking

    Returns:
        Original block

    Raises:
        CorruptedInputError: Empty last column, first outside [0, N),
            or (strict) an inconsistent permutation
    """
    if last_column is None:
        raise InvalidArgumentError("Last column is None")
    last_column = bytes(last_column)
    n = len(last_column)
    if n == 0:
        raise CorruptedInputError("Empty last column")
    if not 0 <= first < n:
        raise CorruptedInputError(f"First index {first} outside [0, {n})")

    first_column, nxt = _next_permutation(last_column)
    if strict:
        _check_cycle(first, nxt, last_column)

    result = bytearray(n)
    cursor = first
    for i in range(n):
        result[i] = first_column[cursor]
        cursor = nxt[cursor]
    return bytes(result)


def transform(source: BinaryIn, sink: BinaryOut, algorithm: str = 'doubling') -> BWTBlock:
    """
    Read a whole block from source and write first index + last column

    Nothing is written when the block is empty.
    """
    block = source.read_all()
    if not block:
        raise InvalidArgumentError("Cannot transform an empty block")

    encoded = encode_block(block, algorithm=algorithm)
    logger.debug("BWT encoded %d bytes, first index %d", len(block), encoded.first)

    sink.write_int(encoded.first)
    sink.write_bytes(encoded.last_column)
    return encoded


def inverse_transform(source: BinaryIn, sink: BinaryOut, strict: bool = True) -> bytes:
    """
    Read first index + last column from source and write the original block
    """
    first = source.read_int()
    last_column = source.read_all()
    decoded = decode_block(first, last_column, strict=strict)
    logger.debug("BWT decoded %d bytes from first index %d", len(decoded), first)

    sink.write_bytes(decoded)
    return decoded


def bwt_transform(data: bytes, algorithm: str = 'doubling') -> bytes:
    """
    Apply the forward transform to an in-memory block

    Returns:
        Wire-format bytes: 4-byte first index followed by the last column
    """
    buffer = BytesIO()
    with BinaryOut(buffer) as out:
        transform(BinaryIn(BytesIO(data)), out, algorithm=algorithm)
    return buffer.getvalue()


def bwt_inverse(data: bytes, strict: bool = True) -> bytes:
    """
    Reverse bwt_transform()

    Args:
        data: Wire-format bytes
        strict: Fail closed on corrupted input

    Returns:
        Original bytes
    """
    buffer = BytesIO()
    with BinaryOut(buffer) as out:
        inverse_transform(BinaryIn(BytesIO(data)), out, strict=strict)
    return buffer.getvalue()


class BurrowsWheelerCodec(TransformProtocol):
    """BWT as a pipeline stage"""

    def __init__(self, algorithm: str = 'doubling', strict: bool = True):
        self.algorithm = algorithm
        self.strict = strict

    def encode(self, data: bytes) -> bytes:
        return bwt_transform(data, algorithm=self.algorithm)

    def decode(self, data: bytes) -> bytes:
        return bwt_inverse(data, strict=self.strict)

    @property
    def name(self) -> str:
        return 'bwt'
