"""
Data models for blocksort.

This module contains pure data structures with no business logic.
"""

from dataclasses import dataclass

__all__ = [
    'BWTBlock',
    'PipelineStats',
]


@dataclass(frozen=True)
class BWTBlock:
    """Result of a forward Burrows-Wheeler transform over one block."""
    first: int          # rank of the identity rotation in sorted order
    last_column: bytes  # last byte of every sorted rotation

    def __len__(self) -> int:
        return len(self.last_column)


@dataclass
class PipelineStats:
    """Statistics for one pass through the BWT -> MTF pipeline."""
    original_size: int
    transformed_size: int
    first_index: int
    zero_ratio: float       # share of MTF indices equal to 0
    longest_zero_run: int
    distinct_symbols: int
    elapsed: float
