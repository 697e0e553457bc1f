from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from wordgrid.grid import DEFAULT_GRID, GridGeometry

if TYPE_CHECKING:
    from wordgrid.generator import GenerationConfig

# Skewed towards vowels and common consonants, roughly English letter frequency
LETTER_BAG = (
    "EEEEEEEEEEEE"
    "AAAAAAAAAA"
    "RRRRRRRRRR"
    "IIIIIIIII"
    "OOOOOOOO"
    "TTTTTTTT"
    "NNNNNNNN"
    "SSSSSSS"
    "LLLLLL"
    "UUUU"
    "DDDD"
    "GGG"
    "BBCCMMPPFFHHVVWWYY"
    "KJXQZ"
)

VOWELS = frozenset("AEIOU")
HARD_CONSONANTS = frozenset("JKQXZ")


def sample_board(rng: random.Random | None = None, letter_bag: str = LETTER_BAG, size: int = 16) -> list[str]:
    """Draw ``size`` letters independently from the bag. No constraints applied."""
    if not letter_bag:
        raise ValueError("Letter bag is empty")
    choice = rng.choice if rng is not None else random.choice
    return [choice(letter_bag) for _ in range(size)]


def count_vowels(board: Sequence[str]) -> int:
    return sum(1 for letter in board if letter in VOWELS)


def count_hard_consonants(board: Sequence[str]) -> int:
    return sum(1 for letter in board if letter in HARD_CONSONANTS)


def q_has_adjacent_u(board: Sequence[str], geometry: GridGeometry = DEFAULT_GRID) -> bool:
    """True when every Q on the board touches at least one U (or there is no Q)."""
    for idx, letter in enumerate(board):
        if letter == "Q" and not any(board[n] == "U" for n in geometry.neighbors(idx)):
            return False
    return True


def has_clump(board: Sequence[str], geometry: GridGeometry = DEFAULT_GRID) -> bool:
    """True if some 2x2 window is all vowels or all non-vowels."""
    for window in geometry.windows():
        vowels = sum(1 for idx in window if board[idx] in VOWELS)
        if vowels == 0 or vowels == len(window):
            return True
    return False


def check_board(board: Sequence[str], config: GenerationConfig, geometry: GridGeometry = DEFAULT_GRID) -> str | None:
    """Run the structural rules cheapest first.

    Returns the name of the first rule the board breaks, or None if it passes.
    """
    geometry.check_board(board)

    vowels = count_vowels(board)
    if vowels < config.min_vowels or vowels > config.max_vowels:
        return "vowels"
    if count_hard_consonants(board) > config.max_hard_consonants:
        return "hard_consonants"
    if not q_has_adjacent_u(board, geometry):
        return "q_without_u"
    if has_clump(board, geometry):
        return "clump"
    return None
