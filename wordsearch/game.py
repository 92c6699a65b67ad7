from __future__ import annotations

import logging
from typing import Iterable, Sequence

from wordsearch.board import Board
from wordsearch.errors import IllegalStateError, InvalidArgumentError
from wordsearch.lexicon import Lexicon, fold, load_lexicon
from wordsearch.metrics import SearchTimer
from wordsearch.solver import find_all_words, find_path, score_words

logger = logging.getLogger("wordsearch")


class WordSearchGame:
    """A lexicon plus a replaceable board.

    Arguments and state are validated here, before any search runs. The
    lexicon is loaded once; every dictionary query raises IllegalStateError
    until then. The board starts as the default 4x4 board and may be replaced
    at any time, but not while a search against it is running.
    """

    def __init__(self, max_board_size: int | None = None):
        self.max_board_size = max_board_size
        self._lexicon: Lexicon | None = None
        self._board = Board.default()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def lexicon_loaded(self) -> bool:
        return self._lexicon is not None

    def _require_lexicon(self) -> Lexicon:
        if self._lexicon is None:
            raise IllegalStateError("Lexicon has not been loaded")
        return self._lexicon

    @staticmethod
    def _check_min_length(minimum_word_length):
        if (
            isinstance(minimum_word_length, bool)
            or not isinstance(minimum_word_length, int)
            or minimum_word_length < 1
        ):
            raise InvalidArgumentError(f"Minimum word length must be an integer >= 1, got {minimum_word_length!r}")

    @staticmethod
    def _check_text(value, what: str):
        if not isinstance(value, str):
            raise InvalidArgumentError(f"{what} must be a string, got {value!r}")

    def load_lexicon(self, path) -> int:
        """Load the dictionary at ``path``; returns the number of words.

        A failed load leaves the previous lexicon (or the unloaded state) in place.
        """
        self._lexicon = load_lexicon(path)
        return len(self._lexicon)

    def set_board(self, tiles: Sequence[str]):
        self._board = Board(tiles, max_size=self.max_board_size)
        logger.info("Board set: %dx%d", self._board.size, self._board.size)
        logger.debug("Board tiles:%s", self._board.render())

    def render(self) -> str:
        return self._board.render()

    def is_valid_word(self, word: str) -> bool:
        self._check_text(word, "Word")
        return self._require_lexicon().contains_word(word)

    def is_valid_prefix(self, prefix: str) -> bool:
        self._check_text(prefix, "Prefix")
        return self._require_lexicon().has_prefix(prefix)

    def get_all_scorable_words(self, minimum_word_length: int, timer: SearchTimer | None = None) -> list[str]:
        self._check_min_length(minimum_word_length)
        lexicon = self._require_lexicon()

        timer = timer or SearchTimer("enumerate")
        with timer.stage("find_all_words"):
            words = find_all_words(self._board, lexicon, minimum_word_length)
        logger.info("Found %d words of length >= %d on %dx%d board",
                    len(words), minimum_word_length, self._board.size, self._board.size)
        return words

    def is_on_board(self, word: str) -> list[int]:
        self._check_text(word, "Word")
        self._require_lexicon()
        return find_path(self._board, fold(word))

    def get_score_for_words(self, words: Iterable[str], minimum_word_length: int) -> int:
        self._check_min_length(minimum_word_length)
        if words is None:
            raise InvalidArgumentError("Words must not be None")
        lexicon = self._require_lexicon()

        words = list(words)
        for word in words:
            self._check_text(word, "Word")
        words = set(words)

        timer = SearchTimer("score")
        with timer.stage("score_words"):
            score = score_words(words, lexicon, self._board, minimum_word_length)
        logger.info("Scored %d words: %d points", len(words), score)
        return score
