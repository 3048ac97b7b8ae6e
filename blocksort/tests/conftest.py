"""
Pytest configuration and shared fixtures for blocksort tests
"""

import logging
import random

import pytest
from typing import Dict, List

ABRA = b"ABRACADABRA!"


@pytest.fixture(autouse=True)
def reset_blocksort_logger():
    """Undo logging changes made by CLI invocations"""
    yield
    logger = logging.getLogger("blocksort")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def abra() -> bytes:
    """Classic test block"""
    return ABRA


@pytest.fixture
def sample_blocks() -> List[bytes]:
    """Blocks covering the usual edge cases"""
    return [
        b"A",
        b"AB",
        b"BA",
        b"banana",
        b"mississippi",
        ABRA,
        b"aaaaaaaa",
        b"abababab",
        b"abcabcabc",
        bytes(range(256)),
        bytes([0, 255, 0, 255, 1]),
        b"The quick brown fox jumps over the lazy dog. " * 8,
    ]


@pytest.fixture
def random_blocks() -> List[bytes]:
    """Seeded random blocks over small and full alphabets"""
    rng = random.Random(20240611)
    blocks = []
    for length in (1, 2, 3, 7, 16, 63, 200):
        for alphabet in (b"ab", b"ACGT", bytes(range(256))):
            blocks.append(bytes(rng.choice(alphabet) for _ in range(length)))
    return blocks


@pytest.fixture
def text_block() -> bytes:
    """Natural-language text with plenty of repeated contexts"""
    paragraph = (
        "It was the best of times, it was the worst of times, it was the age "
        "of wisdom, it was the age of foolishness, it was the epoch of belief, "
        "it was the epoch of incredulity, it was the season of Light, it was "
        "the season of Darkness.\n"
    )
    return (paragraph * 20).encode("ascii")


@pytest.fixture
def mock_settings() -> Dict:
    """Default settings for testing"""
    return {
        'suffix_algorithm': 'doubling',
        'strict': True,
        'measure': False,
    }
