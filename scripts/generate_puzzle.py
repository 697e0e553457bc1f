"""
Generate and store one day's puzzle. Meant to be run once a day by a scheduler.

Usage:
    python -m scripts.generate_puzzle [--date YYYY-MM-DD] [--seed N] [--max-attempts N]

Exits with status 1 when no suitable board is found within the attempt limit.
"""
import argparse
import dataclasses
import logging
import random
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordgrid.dictionaries import get_dictionaries
from wordgrid.generator import GenerationConfig, GenerationExhaustedError, generate_puzzle
from wordgrid.metrics import StageTimer
from wordgrid.settings import settings
from wordgrid.store import PuzzleStore, puzzle_date

logger = logging.getLogger("wordgrid")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the daily word grid puzzle")
    parser.add_argument("--date", default=None, help="Puzzle date (default: today in PUZZLE_TIMEZONE)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible boards")
    parser.add_argument("--max-attempts", type=int, default=None, help="Override MAX_ATTEMPTS")
    parser.add_argument("--out-dir", type=Path, default=None, help="Override PUZZLES_DIR")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    date_str = args.date or puzzle_date(settings.PUZZLE_TIMEZONE)
    store = PuzzleStore(args.out_dir or settings.PUZZLES_DIR)
    try:
        store.path_for(date_str)
        config = GenerationConfig.from_settings(settings)
        if args.max_attempts is not None:
            config = dataclasses.replace(config, max_attempts=args.max_attempts)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Generating new puzzle for %s...", date_str)
    common_trie, full_trie = get_dictionaries(settings)

    timer = StageTimer()
    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        record = generate_puzzle(common_trie, full_trie, config, rng=rng, timer=timer)
    except GenerationExhaustedError as e:
        logger.error("Failed to generate a suitable puzzle for %s: %s", date_str, e)
        return 1

    store.save(date_str, record)
    timer.log_summary()
    logger.info("Board %s with %d words", "".join(record.board), len(record.all_words))
    return 0


if __name__ == "__main__":
    sys.exit(main())
