"""
Runtime settings for the block-sorting transforms.

Settings come from defaults, then environment variables, then CLI options
(click binds the same environment variables on its options).
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from blocksort.errors import InvalidArgumentError

__all__ = ['BlockSortSettings', 'SUFFIX_ALGORITHMS', 'ENV_PREFIX']

ENV_PREFIX = 'BLOCKSORT_'
SUFFIX_ALGORITHMS = ('doubling', 'naive')

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArgumentError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class BlockSortSettings:
    """
    Settings shared by the CLI and the pipeline service.

    Attributes:
        suffix_algorithm: 'doubling' (prefix doubling) or 'naive'
            (full-rotation comparator sort)
        strict: Verify the inverse-transform permutation and fail closed
            on corrupted input; False decodes without the check
        measure: Collect and report pipeline statistics
    """
    suffix_algorithm: str = 'doubling'
    strict: bool = True
    measure: bool = False

    def __post_init__(self):
        if self.suffix_algorithm not in SUFFIX_ALGORITHMS:
            raise InvalidArgumentError(
                f"Unknown suffix algorithm {self.suffix_algorithm!r}, "
                f"expected one of {', '.join(SUFFIX_ALGORITHMS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BlockSortSettings':
        """
        Build settings from BLOCKSORT_* environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings with environment overrides applied
        """
        env = os.environ if environ is None else environ
        overrides = {}

        algorithm = env.get(f'{ENV_PREFIX}SUFFIX_ALGORITHM')
        if algorithm:
            overrides['suffix_algorithm'] = algorithm.strip().lower()

        strict = env.get(f'{ENV_PREFIX}STRICT')
        if strict:
            overrides['strict'] = _parse_bool(f'{ENV_PREFIX}STRICT', strict)

        return cls(**overrides)

    def with_overrides(self, **kwargs) -> 'BlockSortSettings':
        """Return a copy with every non-None keyword applied"""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})
