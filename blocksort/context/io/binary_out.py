"""
Bit-exact byte-stream sink

Values are packed most-significant bit first into an 8-bit rack which is
written out each time it fills. flush() pads a partial byte with zero bits.
"""

from typing import BinaryIO

from blocksort.errors import InvalidArgumentError


class BinaryOut:
    """Write fixed-width values to a binary stream"""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._rack = 0
        self._bit_count = 0
        self._closed = False
        self.bytes_written = 0

    def write_bits(self, value: int, width: int) -> None:
        """
        Write the low `width` bits of value, MSB first

        Args:
            value: Non-negative integer that fits in `width` bits
            width: Number of bits, 1..32
        """
        if self._closed:
            raise ValueError("Write to a closed BinaryOut")
        if not 1 <= width <= 32:
            raise InvalidArgumentError(f"Bit width must be in [1, 32], got {width}")
        if value < 0 or value >> width:
            raise InvalidArgumentError(f"Value {value} does not fit in {width} bits")

        # Byte-aligned fast path
        if self._bit_count == 0 and width % 8 == 0:
            self._stream.write(value.to_bytes(width // 8, 'big'))
            self.bytes_written += width // 8
            return

        for i in range(width):
            bit = (value >> (width - 1 - i)) & 1
            self._rack = (self._rack << 1) | bit
            self._bit_count += 1
            if self._bit_count == 8:
                self._emit_rack()

    def _emit_rack(self) -> None:
        self._stream.write(bytes([self._rack]))
        self.bytes_written += 1
        self._rack = 0
        self._bit_count = 0

    def write_byte(self, value: int) -> None:
        self.write_bits(value, 8)

    def write_int(self, value: int) -> None:
        self.write_bits(value, 32)

    def write_bytes(self, data: bytes) -> None:
        """Write a run of 8-bit values"""
        if self._bit_count == 0 and not self._closed:
            self._stream.write(bytes(data))
            self.bytes_written += len(data)
            return
        for b in data:
            self.write_byte(b)

    def flush(self) -> None:
        """
        Pad any partial byte with zeros and flush the underlying stream

        The stream is left untouched while nothing has been written, so a
        lazily opened output file is never created or truncated.
        """
        if self._bit_count:
            self._rack <<= 8 - self._bit_count
            self._emit_rack()
        if self.bytes_written:
            self._stream.flush()

    def close(self) -> None:
        """Flush and finalize; writes after close() raise"""
        if self._closed:
            return
        self.flush()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> 'BinaryOut':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
