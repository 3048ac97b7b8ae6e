"""
Byte-stream collaborators.
"""

from blocksort.context.io.binary_in import BinaryIn
from blocksort.context.io.binary_out import BinaryOut

__all__ = [
    'BinaryIn',
    'BinaryOut',
]
