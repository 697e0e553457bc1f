"""Process-wide, read-only dictionary tries, loaded on first use."""

import logging
import threading
from pathlib import Path

from wordgrid.solver import Trie, load_trie_json

logger = logging.getLogger("wordgrid")

_lock = threading.Lock()
_common_trie: Trie | None = None
_full_trie: Trie | None = None


def _load(path: Path) -> Trie:
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            "Run scripts/build_dictionary.py to create it."
        )
    trie = load_trie_json(str(path))
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie


def get_dictionaries(cfg) -> tuple[Trie, Trie]:
    """Return (common_trie, full_trie), loading both on the first call."""
    global _common_trie, _full_trie
    with _lock:
        if _common_trie is None or _full_trie is None:
            logger.info("Initializing tries...")
            _common_trie = _load(Path(cfg.DICTIONARY_COMMON_PATH))
            _full_trie = _load(Path(cfg.DICTIONARY_PATH))
        return _common_trie, _full_trie


def reset_dictionaries():
    global _common_trie, _full_trie
    with _lock:
        _common_trie = None
        _full_trie = None
