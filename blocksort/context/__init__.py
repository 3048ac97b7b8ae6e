"""
Context layer - domain-specific implementations.
"""

from blocksort.context.io import BinaryIn, BinaryOut
from blocksort.context.encoding import CircularSuffixArray, BurrowsWheelerCodec, MoveToFrontCodec

__all__ = [
    'BinaryIn',
    'BinaryOut',
    'CircularSuffixArray',
    'BurrowsWheelerCodec',
    'MoveToFrontCodec',
]
