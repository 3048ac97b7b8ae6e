"""
BlockSortPipeline: the structural half of a BZip2-style compressor

Chains the transforms in compression order:
    raw bytes -> BWT -> MTF -> (entropy coder, not part of this package)

and reverses them for decompression:
    (entropy decoder) -> MTF decode -> BWT inverse -> raw bytes

The output is not smaller than the input; it is rearranged so that a
downstream entropy coder sees long zero runs and a skewed distribution.
"""

import logging
import time
from typing import List, Optional, Tuple

from blocksort.config import BlockSortSettings
from blocksort.context.encoding.bwt import BurrowsWheelerCodec
from blocksort.context.encoding.mtf import MoveToFrontCodec, zero_runs
from blocksort.errors import InvalidArgumentError
from blocksort.models import PipelineStats
from blocksort.protocols import TransformProtocol

logger = logging.getLogger(__name__)

HEADER_SIZE = 4


class BlockSortPipeline:
    """Run a block through BWT then MTF, and back"""

    def __init__(self, settings: Optional[BlockSortSettings] = None):
        self.settings = settings or BlockSortSettings()
        self.stages: List[TransformProtocol] = [
            BurrowsWheelerCodec(
                algorithm=self.settings.suffix_algorithm,
                strict=self.settings.strict,
            ),
            MoveToFrontCodec(),
        ]
        self.last_stats: Optional[PipelineStats] = None

    def compress(self, data: bytes, verbose: bool = False) -> Tuple[bytes, PipelineStats]:
        """
        Transform a block for entropy coding

        Args:
            data: Non-empty input block
            verbose: Log each stage at INFO instead of DEBUG

        Returns:
            (transformed bytes, statistics)
        """
        if not data:
            raise InvalidArgumentError("Cannot compress an empty block")

        level = logging.INFO if verbose else logging.DEBUG
        start = time.time()

        result = bytes(data)
        intermediate = []
        for stage in self.stages:
            result = stage.encode(result)
            intermediate.append(result)
            logger.log(level, "%s: %d -> %d bytes", stage.name, len(data), len(result))

        bwt_out = intermediate[0]
        first_index = int.from_bytes(bwt_out[:HEADER_SIZE], 'big')
        stats = self._measure(data, result, first_index, time.time() - start)
        self.last_stats = stats
        return result, stats

    def decompress(self, data: bytes, verbose: bool = False) -> bytes:
        """
        Reverse compress()

        Args:
            data: Bytes produced by compress()
            verbose: Log each stage at INFO instead of DEBUG

        Returns:
            Original block
        """
        level = logging.INFO if verbose else logging.DEBUG
        result = bytes(data)
        for stage in reversed(self.stages):
            result = stage.decode(result)
            logger.log(level, "%s inverse: %d bytes", stage.name, len(result))
        return result

    @staticmethod
    def _measure(original: bytes, transformed: bytes, first_index: int,
                 elapsed: float) -> PipelineStats:
        # The first four ranks encode the BWT header, not the block
        ranks = transformed[HEADER_SIZE:]
        runs = zero_runs(ranks)
        zero_count = sum(runs)
        return PipelineStats(
            original_size=len(original),
            transformed_size=len(transformed),
            first_index=first_index,
            zero_ratio=zero_count / len(ranks) if ranks else 0.0,
            longest_zero_run=max(runs) if runs else 0,
            distinct_symbols=len(set(ranks)),
            elapsed=elapsed,
        )
