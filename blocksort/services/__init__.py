"""
Services layer - application orchestration.
"""

from blocksort.services.pipeline import BlockSortPipeline

# Provide consistent naming
Pipeline = BlockSortPipeline

__all__ = [
    'BlockSortPipeline',
    'Pipeline',
]
