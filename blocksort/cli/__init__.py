"""
Command-line interface for blocksort.
"""

from blocksort.cli.commands import bwt, mtf, pipeline, csa

__all__ = [
    'bwt',
    'mtf',
    'pipeline',
    'csa',
]
