"""
Circular suffix array

Sorts the N circular rotations of a block and exposes the sorted order as a
permutation of rotation start offsets. Rotation i is the block read from
offset i, wrapping to offset 0 after N-1.

Two construction strategies are available:
- naive: comparator sort, each comparison walks up to N bytes of both
  rotations (O(N^2 log N) worst case)
- doubling: prefix doubling over circular ranks (O(N log^2 N))

Both give the same order for rotations that differ. Identical rotations
(periodic blocks) may be ordered differently; that order is not observable
through the Burrows-Wheeler output.
"""

import logging
from functools import cmp_to_key
from typing import Iterator, List, Union

from blocksort.config import SUFFIX_ALGORITHMS
from blocksort.errors import IndexOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)


def _as_block(s: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if s is None:
        raise InvalidArgumentError("Input block is None")
    if isinstance(s, str):
        try:
            return s.encode('latin-1')
        except UnicodeEncodeError as e:
            raise InvalidArgumentError(f"Block text must be 8-bit: {e}") from e
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    raise InvalidArgumentError(f"Input block must be bytes or str, got {type(s).__name__}")


def naive_order(block: bytes) -> List[int]:
    """
    Sort rotation offsets with a full-length circular comparator

    Args:
        block: Non-empty input block

    Returns:
        Rotation offsets in sorted order
    """
    n = len(block)

    def compare(i: int, j: int) -> int:
        for _ in range(n):
            a = block[i]
            b = block[j]
            if a != b:
                return -1 if a < b else 1
            i += 1
            if i == n:
                i = 0
            j += 1
            if j == n:
                j = 0
        return 0

    return sorted(range(n), key=cmp_to_key(compare))


def doubling_order(block: bytes) -> List[int]:
    """
    Sort rotation offsets by prefix doubling

    After round k every rotation is ranked by its first 2k bytes. Ranks
    wrap modulo N, so the loop stops once all ranks are distinct or the
    compared prefix covers the whole rotation.

    Args:
        block: Non-empty input block

    Returns:
        Rotation offsets in sorted order
    """
    n = len(block)
    rank = list(block)
    order = sorted(range(n), key=lambda i: rank[i])
    k = 1
    while k < n:
        order.sort(key=lambda i: (rank[i], rank[(i + k) % n]))

        new_rank = [0] * n
        prev = order[0]
        for cur in order[1:]:
            same = (rank[cur] == rank[prev] and
                    rank[(cur + k) % n] == rank[(prev + k) % n])
            new_rank[cur] = new_rank[prev] + (0 if same else 1)
            prev = cur
        rank = new_rank

        if rank[order[-1]] == n - 1:
            break
        k <<= 1
    return order


_STRATEGIES = {
    'naive': naive_order,
    'doubling': doubling_order,
}


class CircularSuffixArray:
    """
    Sorted circular rotations of a block

    Example:
        >>> csa = CircularSuffixArray("ABRACADABRA!")
        >>> [csa.index(i) for i in range(4)]
        [11, 10, 7, 0]
    """

    def __init__(self, s: Union[bytes, str], algorithm: str = 'doubling'):
        block = _as_block(s)
        if not block:
            raise InvalidArgumentError("Input block is empty")
        if algorithm not in _STRATEGIES:
            raise InvalidArgumentError(
                f"Unknown suffix algorithm {algorithm!r}, expected one of {', '.join(SUFFIX_ALGORITHMS)}"
            )

        self._block = block
        self._index = tuple(_STRATEGIES[algorithm](block))
        logger.debug("Sorted %d rotations with %s", len(block), algorithm)

    @property
    def block(self) -> bytes:
        return self._block

    def length(self) -> int:
        """Length of the input block"""
        return len(self._block)

    def index(self, i: int) -> int:
        """
        Offset of the rotation ranked i-th in sorted order

        Raises:
            IndexOutOfRangeError: i is outside [0, N)
        """
        if not isinstance(i, int) or i < 0 or i >= len(self._index):
            raise IndexOutOfRangeError(f"Index {i!r} outside [0, {len(self._index)})")
        return self._index[i]

    def to_list(self) -> List[int]:
        return list(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __getitem__(self, i: int) -> int:
        return self.index(i)

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __repr__(self) -> str:
        return f"CircularSuffixArray(length={len(self._index)})"
