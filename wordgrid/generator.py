from __future__ import annotations

import logging
import random
from collections import Counter
from contextlib import nullcontext
from dataclasses import dataclass, field
from datetime import datetime, timezone

from wordgrid.board import LETTER_BAG, check_board, sample_board
from wordgrid.grid import GridGeometry
from wordgrid.metrics import StageTimer
from wordgrid.solver import Trie, find_words, sort_words

logger = logging.getLogger("wordgrid")


class GenerationExhaustedError(RuntimeError):
    """No sampled board satisfied every constraint within the attempt ceiling."""

    def __init__(self, attempts: int, rejections: Counter):
        self.attempts = attempts
        self.rejections = rejections
        reasons = ", ".join(f"{k}={v}" for k, v in rejections.most_common())
        super().__init__(f"No suitable board after {attempts} attempts ({reasons})")


@dataclass(frozen=True)
class GenerationConfig:
    min_vowels: int = 5
    max_vowels: int = 7
    max_hard_consonants: int = 1
    min_common_words: int = 30
    max_total_words: int = 100
    max_attempts: int = 10_000
    letter_bag: str = LETTER_BAG
    rows: int = 4
    cols: int = 4

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.min_vowels > self.max_vowels:
            raise ValueError(f"min_vowels ({self.min_vowels}) exceeds max_vowels ({self.max_vowels})")
        if not self.letter_bag:
            raise ValueError("letter_bag is empty")

    @classmethod
    def from_settings(cls, cfg) -> GenerationConfig:
        return cls(
            min_vowels=cfg.MIN_VOWELS,
            max_vowels=cfg.MAX_VOWELS,
            max_hard_consonants=cfg.MAX_HARD_CONSONANTS,
            min_common_words=cfg.MIN_COMMON_WORDS,
            max_total_words=cfg.MAX_TOTAL_WORDS,
            max_attempts=cfg.MAX_ATTEMPTS,
        )


@dataclass
class PuzzleRecord:
    board: list[str]
    all_words: list[str]
    bonuses: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    attempts: int = 0

    def to_dict(self) -> dict:
        return {
            "board": list(self.board),
            "allWords": list(self.all_words),
            "bonuses": list(self.bonuses),
            "createdAt": self.created_at.isoformat(),
        }


def generate_puzzle(
    common_trie: Trie,
    full_trie: Trie,
    config: GenerationConfig | None = None,
    rng: random.Random | None = None,
    timer: StageTimer | None = None,
) -> PuzzleRecord:
    """Rejection-sample boards until one passes every check.

    Structural rules run first; the word finder only runs on boards that pass
    them. Raises GenerationExhaustedError after ``config.max_attempts`` misses.
    """
    config = config or GenerationConfig()
    geometry = GridGeometry(config.rows, config.cols)
    rejections: Counter = Counter()

    def stage(name: str):
        return timer.stage(name) if timer is not None else nullcontext()

    for attempt in range(1, config.max_attempts + 1):
        with stage("sample"):
            board = sample_board(rng, config.letter_bag, geometry.size)

        with stage("validate"):
            reason = check_board(board, config, geometry)
        if reason:
            rejections[reason] += 1
            continue

        with stage("solve_common"):
            common_words = find_words(board, common_trie, geometry)
        if len(common_words) < config.min_common_words:
            rejections["too_few_common"] += 1
            continue

        with stage("solve_full"):
            all_words = find_words(board, full_trie, geometry)
        if len(all_words) > config.max_total_words:
            rejections["too_many_total"] += 1
            continue

        logger.info(
            "Found a suitable board on attempt #%d (%d common, %d total words)",
            attempt, len(common_words), len(all_words),
        )
        logger.debug("Rejections before acceptance: %s", dict(rejections))
        return PuzzleRecord(board=board, all_words=sort_words(all_words), attempts=attempt)

    raise GenerationExhaustedError(config.max_attempts, rejections)
