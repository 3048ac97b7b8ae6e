"""
Byte-stream source

Wraps a binary file object (stdin, an open file, io.BytesIO) and reads it
one byte at a time, as a fixed-width integer, or all at once.
"""

import struct
from typing import BinaryIO, Iterator, Optional

from blocksort.errors import CorruptedInputError

INT_WIDTH = 32


class BinaryIn:
    """Read bytes and 32-bit big-endian integers from a binary stream"""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._peeked: Optional[int] = None
        self._exhausted = False

    def _fill(self) -> None:
        if self._peeked is None and not self._exhausted:
            chunk = self._stream.read(1)
            if chunk:
                self._peeked = chunk[0]
            else:
                self._exhausted = True

    def is_empty(self) -> bool:
        """True once every byte of the stream has been consumed"""
        self._fill()
        return self._peeked is None

    def read_byte(self) -> int:
        """
        Read the next byte

        Returns:
            Byte value in [0, 255]

        Raises:
            EOFError: The stream is exhausted
        """
        self._fill()
        if self._peeked is None:
            raise EOFError("Reading from an empty input stream")
        value = self._peeked
        self._peeked = None
        return value

    def read_int(self) -> int:
        """
        Read a 32-bit big-endian unsigned integer

        Raises:
            CorruptedInputError: Fewer than 4 bytes remain
        """
        raw = bytearray()
        while len(raw) < INT_WIDTH // 8:
            if self.is_empty():
                raise CorruptedInputError(
                    f"Truncated {INT_WIDTH}-bit integer: got {len(raw)} of {INT_WIDTH // 8} bytes"
                )
            raw.append(self.read_byte())
        return struct.unpack('>I', bytes(raw))[0]

    def read_all(self) -> bytes:
        """Read every remaining byte"""
        head = b''
        if self._peeked is not None:
            head = bytes([self._peeked])
            self._peeked = None
        if self._exhausted:
            return head
        rest = self._stream.read()
        self._exhausted = True
        return head + (rest or b'')

    def __iter__(self) -> Iterator[int]:
        while not self.is_empty():
            yield self.read_byte()
