from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from wordgrid.grid import DEFAULT_GRID, GridGeometry

MIN_WORD_LENGTH = 3
END_OF_WORD = "isEndOfWord"


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self._word_count = 0

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_prefix(self, s: str) -> bool:
        return self._walk(s) is not None

    def contains_word(self, s: str) -> bool:
        node = self._walk(s)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._word_count

    @classmethod
    def from_dict(cls, data: Mapping) -> Trie:
        """Build a trie from nested letter mappings with an ``isEndOfWord`` marker.

        Keys that are neither single letters nor the marker are ignored, so an
        empty or marker-less mapping gives a trie that never matches a word.
        """
        trie = cls()
        stack = [(data, trie.root)]
        while stack:
            mapping, node = stack.pop()
            for key, value in mapping.items():
                if key == END_OF_WORD:
                    if value is True and not node.is_word:
                        node.is_word = True
                        trie._word_count += 1
                elif len(key) == 1 and key.isalpha() and isinstance(value, Mapping):
                    # "a" and "A" share one subtree
                    child = node.children.setdefault(key.upper(), TrieNode())
                    stack.append((value, child))
        return trie

    def to_dict(self) -> dict:
        def _node(node: TrieNode) -> dict:
            out: dict = {ch: _node(child) for ch, child in node.children.items()}
            if node.is_word:
                out[END_OF_WORD] = True
            return out

        return _node(self.root)


def load_trie_json(path: str) -> Trie:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a JSON object at the top level")
    return Trie.from_dict(data)


def find_words(board: Sequence[str], trie: Trie, geometry: GridGeometry = DEFAULT_GRID) -> set[str]:
    """Find every word in ``trie`` spelled by a simple path of adjacent cells.

    DFS from each cell with trie prefix pruning and bitmask visited tracking.
    Words shorter than MIN_WORD_LENGTH are never reported.
    """
    geometry.check_board(board)
    cell_chars = [letter.upper() for letter in board]
    neighbors = [geometry.neighbors(idx) for idx in range(geometry.size)]
    found: set[str] = set()

    def dfs(idx: int, node: TrieNode, path: list[str], visited: int):
        child = node.children.get(cell_chars[idx])
        if child is None:
            return

        path.append(cell_chars[idx])
        if child.is_word and len(path) >= MIN_WORD_LENGTH:
            found.add("".join(path))

        if child.children:
            for nidx in neighbors[idx]:
                if not (visited & (1 << nidx)):
                    dfs(nidx, child, path, visited | (1 << nidx))

        path.pop()

    for start in range(geometry.size):
        dfs(start, trie.root, [], 1 << start)

    return found


def sort_words(words) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))
