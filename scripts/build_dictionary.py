"""
Dictionary builder for the word grid puzzle generator.

Usage:
    python -m scripts.build_dictionary [--full URL_OR_PATH] [--common URL_OR_PATH] [--out-dir DIR]

Examples:
    python -m scripts.build_dictionary
    python -m scripts.build_dictionary --full assets/dictionary.txt --out-dir data

This will:
  1. Download (or read) the full Scrabble word list and the 20k common word list
  2. Keep alphabetic words of 3-12 letters, uppercased
  3. Restrict the common list to words that are also in the full list
  4. Add a few custom words the source lists are missing
  5. Write full-dictionary.json and common-dictionary.json as nested trie JSON
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import httpx

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordgrid.solver import Trie
from wordgrid.settings import settings

logger = logging.getLogger("wordgrid")

FULL_WORDS_URL = "https://raw.githubusercontent.com/redbo/scrabble/master/dictionary.txt"
COMMON_WORDS_URL = "https://raw.githubusercontent.com/first20hours/google-10000-english/master/20k.txt"

FULL_CUSTOM_WORDS = ["ZEN", "KIN"]
COMMON_CUSTOM_WORDS = ["QAT", "KIN", "ZEN"]

MIN_LENGTH = 3
MAX_LENGTH = 12


def fetch_words(source: str) -> list[str]:
    """Read a word list from an http(s) URL or a local file."""
    if source.startswith(("http://", "https://")):
        logger.info("Downloading %s...", source)
        resp = httpx.get(source, timeout=60.0, follow_redirects=True)
        resp.raise_for_status()
        text = resp.text
    else:
        logger.info("Reading %s...", source)
        text = Path(source).read_text(encoding="utf-8")
    return text.splitlines()


def clean_words(lines: list[str]) -> list[str]:
    words = []
    for line in lines:
        word = line.strip().upper()
        if MIN_LENGTH <= len(word) <= MAX_LENGTH and word.isascii() and word.isalpha():
            words.append(word)
    return words


def build_word_lists(full_lines: list[str], common_lines: list[str]) -> tuple[list[str], list[str]]:
    full = set(clean_words(full_lines))
    full.update(FULL_CUSTOM_WORDS)

    common = {w for w in clean_words(common_lines) if w in full}
    common.update(w for w in COMMON_CUSTOM_WORDS if w in full)
    return sorted(full), sorted(common)


def write_trie(words: list[str], path: Path):
    trie = Trie()
    for w in words:
        trie.insert(w)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(trie.to_dict(), f, separators=(",", ":"))
    logger.info("Trie with %d words saved to %s", len(trie), path)


def main():
    parser = argparse.ArgumentParser(description="Build the full and common dictionary tries")
    parser.add_argument("--full", default=FULL_WORDS_URL, help="URL or path of the full word list")
    parser.add_argument("--common", default=COMMON_WORDS_URL, help="URL or path of the common word list")
    parser.add_argument("--out-dir", type=Path, default=None,
                        help="Output directory (default: directory of DICTIONARY_PATH)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        full_lines = fetch_words(args.full)
        common_lines = fetch_words(args.common)
    except (httpx.HTTPError, OSError) as e:
        logger.error("Could not fetch word lists: %s", e)
        return 1

    full, common = build_word_lists(full_lines, common_lines)

    if args.out_dir is not None:
        full_path = args.out_dir / settings.DICTIONARY_PATH.name
        common_path = args.out_dir / settings.DICTIONARY_COMMON_PATH.name
    else:
        full_path = settings.DICTIONARY_PATH
        common_path = settings.DICTIONARY_COMMON_PATH

    write_trie(full, full_path)
    write_trie(common, common_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
