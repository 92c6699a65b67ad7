from __future__ import annotations

from typing import Iterable

from wordsearch.board import Board
from wordsearch.lexicon import Lexicon, TrieNode, fold


def find_all_words(board: Board, lexicon: Lexicon, min_length: int) -> list[str]:
    """Find every lexicon word of at least ``min_length`` spelled by a simple path on the board.

    Depth-first search from each cell with trie prefix pruning and bitmask
    visited tracking. An explicit stack replaces recursion, so board size is
    not limited by the interpreter's recursion depth. Each frame carries its
    own word and visited mask; nothing is shared between branches.

    Returns the words sorted alphabetically, without duplicates.
    """
    found: set[str] = set()

    for start in range(len(board)):
        stack: list[tuple[int, TrieNode, str, int]] = [(start, lexicon.root, "", 1 << start)]
        while stack:
            idx, parent, prefix, visited = stack.pop()
            tile = board.tiles[idx]

            # Walk trie through all characters in this cell (handles "QU")
            node = lexicon.descend(parent, tile)
            if node is None:
                continue

            word = prefix + tile
            if node.is_word and len(word) >= min_length:
                found.add(word)

            if node.has_children():  # prune if no further prefixes
                for nidx in board.neighbors(idx):
                    if not (visited & (1 << nidx)):
                        stack.append((nidx, node, word, visited | (1 << nidx)))

    return sorted(found)


def find_path(board: Board, word: str) -> list[int]:
    """Return the first simple path of positions spelling ``word``, or an empty list.

    Start cells are tried in index order and neighbors in the board's scan
    order, so the path returned is deterministic when several exist. A branch
    is extended only while the tiles so far are a literal prefix of ``word``.
    """
    if not word:
        return []

    for start in range(len(board)):
        if not word.startswith(board.tiles[start]):
            continue
        stack: list[tuple[tuple[int, ...], str, int]] = [((start,), board.tiles[start], 1 << start)]
        while stack:
            path, spelled, visited = stack.pop()
            if spelled == word:
                return list(path)

            # Reversed so the first neighbor in scan order is popped first.
            for nidx in reversed(board.neighbors(path[-1])):
                if visited & (1 << nidx):
                    continue
                candidate = spelled + board.tiles[nidx]
                if word.startswith(candidate):
                    stack.append((path + (nidx,), candidate, visited | (1 << nidx)))

    return []


def word_score(word: str, min_length: int) -> int:
    return len(word) - min_length + 1


def score_words(words: Iterable[str], lexicon: Lexicon, board: Board, min_length: int) -> int:
    """Total score of the words that are long enough, in the lexicon, and on the board.

    Each such word earns one point for the minimum length plus one per extra
    character.
    """
    total = 0
    for word in words:
        if len(word) < min_length or not lexicon.contains_word(word):
            continue
        if find_path(board, fold(word)):
            total += word_score(word, min_length)
    return total
