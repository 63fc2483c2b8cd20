"""Shared secrets used across the test modules."""

import logging

import pytest

# "H~2:@ ←2♦yq GB3●( 6♥?↑6": Ages, game ID 14129, Link / Pip, Dimitri,
# behavior 4, linked game, free ring given.
SAMPLE_SECRET = bytes([
     4, 37, 51, 36, 63,
    61, 51, 10, 44, 39,
     3,  0, 52, 21, 48,
    55,  9, 45, 59, 55,
])
SAMPLE_TEXT = "H~2:@ ←2♦yq GB3●( 6♥?↑6"
SAMPLE_DECODED = bytes([
    1, 6, 29, 32, 50, 2, 41, 26, 22, 8,
    29, 32, 59, 43, 6, 0, 0, 4, 0, 6,
])

# Same game as the sample, but for Seasons with Ricky.
SEASONS_SECRET = bytes([
     4, 37, 51, 32, 63,
    61, 51, 10, 44, 39,
     3,  0, 52, 21, 44,
    55,  9, 45, 59, 63,
])

# Game ID 1 (cipher key 1): Ages, hero's quest, Zelda, no child, Moosh,
# behavior 63, not linked, no free ring.
KEY_ONE_SECRET = bytes([
    32, 41, 59, 56, 24,
    22, 55, 32, 40, 44,
    57, 18,  1, 24, 29,
    54, 14, 27, 18, 35,
])


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
