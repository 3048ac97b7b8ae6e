"""
blocksort - Lossless block-sorting transforms

The structural half of a BZip2-style compressor: a circular suffix sort,
the Burrows-Wheeler transform built on it, and the Move-To-Front stage that
usually follows it. None of these shrink data on their own; they rearrange
it so a downstream entropy coder can.

Architecture:
- Models: Pure data structures (BWTBlock, PipelineStats)
- Protocols: Interface contracts (TransformProtocol)
- Context: Transform implementations and byte-stream collaborators
- Services: Application orchestration (BlockSortPipeline)
- CLI: User interface (bwt, mtf, pipeline, csa commands)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from blocksort import models, protocols
from blocksort.config import BlockSortSettings
from blocksort.errors import (
    BlockSortError, InvalidArgumentError, IndexOutOfRangeError, CorruptedInputError
)
from blocksort.context import (
    BinaryIn, BinaryOut, CircularSuffixArray, BurrowsWheelerCodec, MoveToFrontCodec
)
from blocksort.context.encoding import (
    bwt_transform, bwt_inverse, encode_block, decode_block, encode_bytes, decode_bytes
)
from blocksort.services import BlockSortPipeline, Pipeline

__all__ = [
    'models',
    'protocols',
    'BlockSortSettings',
    'BlockSortError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'CorruptedInputError',
    'BinaryIn',
    'BinaryOut',
    'CircularSuffixArray',
    'BurrowsWheelerCodec',
    'MoveToFrontCodec',
    'bwt_transform',
    'bwt_inverse',
    'encode_block',
    'decode_block',
    'encode_bytes',
    'decode_bytes',
    'BlockSortPipeline',
    'Pipeline',
]
