"""
Protocols (interfaces) for blocksort components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod

__all__ = [
    'TransformProtocol',
]


class TransformProtocol(ABC):
    """Protocol for a reversible whole-block byte transform."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """
        Apply the forward transform.

        Args:
            data: Raw bytes

        Returns:
            Transformed bytes in the component's wire format
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """
        Apply the inverse transform.

        Args:
            data: Bytes produced by encode()

        Returns:
            Original bytes
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return transform name for logging."""
        pass
