"""
Move-To-Front (MTF) transform

Replaces each byte with its current rank in a recency-ordered table of all
256 byte values, then moves that byte to rank 0. Run after the BWT, the
long runs of repeated bytes turn into runs of zeros.

The table starts in ascending order for every encode or decode call and is
never shared between calls.
"""

import logging
from io import BytesIO
from typing import Iterable, List

from blocksort.context.io import BinaryIn, BinaryOut
from blocksort.errors import CorruptedInputError, InvalidArgumentError
from blocksort.protocols import TransformProtocol

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 256


class SymbolTable:
    """Fixed-size permutation of the 256 byte values"""

    def __init__(self):
        self._table = bytearray(range(ALPHABET_SIZE))

    def rank_of(self, symbol: int) -> int:
        return self._table.index(symbol)

    def symbol_at(self, rank: int) -> int:
        return self._table[rank]

    def move_to_front(self, rank: int) -> int:
        """Shift entries 0..rank-1 up by one and put entry `rank` at 0"""
        symbol = self._table[rank]
        if rank:
            self._table[1:rank + 1] = self._table[0:rank]
            self._table[0] = symbol
        return symbol

    def snapshot(self) -> bytes:
        return bytes(self._table)


def encode_bytes(data: Iterable[int]) -> bytes:
    """
    MTF-encode a byte sequence

    Args:
        data: Bytes (or byte values) to encode

    Returns:
        One rank per input byte

    Examples:
        >>> list(encode_bytes(b'AABA'))
        [65, 0, 66, 1]
    """
    if data is None:
        raise InvalidArgumentError("Input data is None")
    table = SymbolTable()
    out = bytearray()
    for symbol in data:
        if not 0 <= symbol < ALPHABET_SIZE:
            raise InvalidArgumentError(f"Byte value {symbol} outside [0, 255]")
        rank = table.rank_of(symbol)
        table.move_to_front(rank)
        out.append(rank)
    return bytes(out)


def decode_bytes(indices: Iterable[int]) -> bytes:
    """
    Reverse encode_bytes()

    Raises:
        CorruptedInputError: An index falls outside [0, 255]
    """
    if indices is None:
        raise InvalidArgumentError("Input indices are None")
    table = SymbolTable()
    out = bytearray()
    for rank in indices:
        if not 0 <= rank < ALPHABET_SIZE:
            raise CorruptedInputError(f"MTF index {rank} outside [0, 255]")
        out.append(table.move_to_front(rank))
    return bytes(out)


def encode(source: BinaryIn, sink: BinaryOut) -> int:
    """
    Encode source until exhausted, one 8-bit rank per byte

    Returns:
        Number of bytes encoded
    """
    ranks = encode_bytes(source.read_all())
    sink.write_bytes(ranks)
    logger.debug("MTF encoded %d bytes", len(ranks))
    return len(ranks)


def decode(source: BinaryIn, sink: BinaryOut) -> int:
    """
    Decode 8-bit ranks from source until exhausted

    Returns:
        Number of bytes decoded
    """
    data = decode_bytes(source.read_all())
    sink.write_bytes(data)
    logger.debug("MTF decoded %d bytes", len(data))
    return len(data)


def zero_runs(indices: bytes) -> List[int]:
    """Lengths of the runs of zero ranks, in order"""
    runs = []
    current = 0
    for rank in indices:
        if rank == 0:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return runs


class MoveToFrontCodec(TransformProtocol):
    """MTF as a pipeline stage"""

    def encode(self, data: bytes) -> bytes:
        buffer = BytesIO()
        with BinaryOut(buffer) as out:
            encode(BinaryIn(BytesIO(data)), out)
        return buffer.getvalue()

    def decode(self, data: bytes) -> bytes:
        buffer = BytesIO()
        with BinaryOut(buffer) as out:
            decode(BinaryIn(BytesIO(data)), out)
        return buffer.getvalue()

    @property
    def name(self) -> str:
        return 'mtf'
