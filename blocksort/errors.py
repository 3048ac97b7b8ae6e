"""
Typed errors raised by the block-sorting transforms.

Precondition violations (InvalidArgumentError, IndexOutOfRangeError) are
raised at the call boundary before any output is written. CorruptedInputError
is raised on the decode side when the data itself cannot be trusted.
"""

__all__ = [
    'BlockSortError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'CorruptedInputError',
]


class BlockSortError(Exception):
    """Base class for every error raised by blocksort."""


class InvalidArgumentError(BlockSortError, ValueError):
    """A required input is missing or malformed (caller error)."""


class IndexOutOfRangeError(BlockSortError, IndexError):
    """A rank query fell outside [0, N)."""


class CorruptedInputError(BlockSortError, ValueError):
    """Encoded data does not describe a valid block."""
