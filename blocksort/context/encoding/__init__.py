"""
Encoding context: block-sorting transforms.
"""

from blocksort.context.encoding.suffix_array import CircularSuffixArray
from blocksort.context.encoding.bwt import (
    bwt_transform, bwt_inverse, encode_block, decode_block, BurrowsWheelerCodec
)
from blocksort.context.encoding.mtf import encode_bytes, decode_bytes, MoveToFrontCodec

__all__ = [
    'CircularSuffixArray',
    'bwt_transform',
    'bwt_inverse',
    'encode_block',
    'decode_block',
    'BurrowsWheelerCodec',
    'encode_bytes',
    'decode_bytes',
    'MoveToFrontCodec',
]
