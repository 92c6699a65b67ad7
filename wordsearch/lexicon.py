from __future__ import annotations

import logging

from wordsearch.errors import InvalidArgumentError

logger = logging.getLogger("wordsearch")

ALPHABET_SIZE = 27
OTHER_SYMBOL = "-"
OTHER_SLOT = 26


def char_slot(ch: str) -> int | None:
    """Map an uppercase character to its child slot, or None if it is unsupported."""
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    if ch == OTHER_SYMBOL:
        return OTHER_SLOT
    return None


def fold(text: str) -> str:
    """Uppercase ASCII text; anything else is returned unchanged and so never matches a slot.

    Unicode case mapping turns some non-ASCII characters into ASCII letters
    ("ﬁ" -> "FI", "ß" -> "SS"), which would let them match.
    """
    return text.upper() if text.isascii() else text


def is_supported(word: str) -> bool:
    return bool(word) and all(char_slot(ch) is not None for ch in fold(word))


class TrieNode:
    __slots__ = ("children", "is_word", "child_count")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_word: bool = False
        self.child_count: int = 0

    def child(self, ch: str) -> TrieNode | None:
        slot = char_slot(ch)
        if slot is None:
            return None
        return self.children[slot]

    def has_children(self) -> bool:
        return self.child_count > 0


class Lexicon:
    """Prefix tree of uppercase words over A-Z plus the hyphen.

    ASCII queries are uppercased first. A query containing any other
    character matches nothing.
    """

    def __init__(self):
        self.root = TrieNode()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def insert(self, word: str):
        word = fold(word)
        if not is_supported(word):
            raise InvalidArgumentError(f"Cannot insert {word!r}: empty or unsupported characters")
        node = self.root
        for ch in word:
            slot = char_slot(ch)
            if node.children[slot] is None:
                node.children[slot] = TrieNode()
                node.child_count += 1
            node = node.children[slot]
        if not node.is_word:
            node.is_word = True
            self._count += 1

    def descend(self, node: TrieNode, chars: str) -> TrieNode | None:
        """Walk ``chars`` down from ``node``; multi-character tiles such as "QU" take several steps."""
        for ch in chars:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def _find(self, text: str) -> TrieNode | None:
        if not text:
            return None
        return self.descend(self.root, fold(text))

    def contains_word(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        # The empty string is never a prefix.
        return self._find(prefix) is not None


def load_lexicon(path) -> Lexicon:
    if path is None:
        raise InvalidArgumentError("Lexicon path must not be None")
    lexicon = Lexicon()
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                for token in line.split():
                    if is_supported(token):
                        lexicon.insert(token)
                    else:
                        skipped += 1
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"Cannot read lexicon file {path}: {e}") from e

    if skipped:
        logger.warning("Skipped %d tokens with unsupported characters in %s", skipped, path)
    logger.info("Loaded %d words from %s", len(lexicon), path)
    return lexicon
