"""Shared fixtures for word grid tests."""

from __future__ import annotations

import pytest

from wordgrid.grid import GridGeometry
from wordgrid.solver import Trie

# C A T S
# O R E N
# D I N G
# L O S T
GOLDEN_BOARD = list("CATSORENDINGLOST")

GOLDEN_WORDS = [
    "AT", "RE", "CAT", "CATS", "CAR", "CATER", "CATERS", "ARE", "DIN", "COD",
    "DOG", "TEN", "SENT", "LOST", "RAT", "TAR", "DIRE", "STING", "SING", "GIN",
    "TENET", "ROD", "IRON", "RING", "ZEBRA",
]

GOLDEN_EXPECTED = {
    "CAT", "CATS", "CAR", "CATER", "ARE", "DIN", "COD", "TEN", "SENT",
    "LOST", "RAT", "TAR", "DIRE", "SING", "ROD", "RING",
}

COMMON_WORDS = [
    "ACE", "AGE", "AID", "AIM", "AIR", "ALE", "AND", "ANT", "ANY", "APE",
    "ARE", "ART", "ATE", "BAD", "BAT", "BED", "BET", "BIT", "CAN", "CAR",
    "CAT", "COT", "DEN", "DIE", "DIN", "DOE", "DOT", "EAR", "EAT", "END",
    "ERA", "GAS", "GET", "HAT", "HEN", "HER", "HIT", "ICE", "INN", "ION",
    "IRE", "ITS", "LAD", "LED", "LET", "LID", "LIE", "LIT", "LOT", "NET",
    "NIT", "NOD", "NOR", "NOT", "NUT", "OAR", "ODE", "OIL", "ONE", "ORE",
    "OUR", "OUT", "RAN", "RAT", "RED", "RID", "ROD", "ROE", "ROT", "RUN",
    "RUT", "SAD", "SAT", "SEA", "SET", "SIN", "SIT", "SON", "SUN", "TAN",
    "TAR", "TEA", "TEN", "TIE", "TIN", "TOE", "TON", "USE", "RATE", "TEAR",
    "REST", "SORT", "NOTE", "TONE", "STAR", "RAIN", "LINE", "LION", "SEAT",
    "EAST", "DIET", "TIDE", "EDIT", "NEST", "RENT", "TIRE", "RISE", "SIRE",
]

FULL_EXTRA_WORDS = [
    "AAL", "AIT", "ALT", "ANE", "ANI", "ARS", "EDS", "ENS", "ERN", "ERS",
    "ETA", "NAE", "OES", "ORA", "ORT", "RES", "RET", "SEL", "SER", "TAE",
    "TAO", "TEL", "TES", "UTA", "UTE", "TIRO", "SNIT", "TINE", "ROTE", "OATS",
]


def make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w.upper())
    return trie


def has_path(board: list[str], word: str, geometry: GridGeometry) -> bool:
    """Independent check that ``word`` is spelled by a simple path on the board."""

    def walk(idx: int, pos: int, used: frozenset[int]) -> bool:
        if board[idx] != word[pos]:
            return False
        if pos == len(word) - 1:
            return True
        return any(
            walk(n, pos + 1, used | {n})
            for n in geometry.neighbors(idx)
            if n not in used
        )

    return any(walk(i, 0, frozenset({i})) for i in range(geometry.size))


@pytest.fixture
def golden_trie() -> Trie:
    return make_trie(GOLDEN_WORDS)


@pytest.fixture
def common_trie() -> Trie:
    return make_trie(COMMON_WORDS)


@pytest.fixture
def full_trie() -> Trie:
    return make_trie(COMMON_WORDS + FULL_EXTRA_WORDS)
