"""
Solve a word search board from the command line.

Usage:
    python -m scripts.solve <dictionary_path> [--board T T ...] [--min-length K] [--score W ...]

Examples:
    python -m scripts.solve dictionary.txt
    python -m scripts.solve dictionary.txt --board C A T S R E P O B O N E D I G S
    python -m scripts.solve dictionary.txt --board QU I T E S A N D R --min-length 4
    python -m scripts.solve dictionary.txt --score ACE PEN BONE

This will:
  1. Load the dictionary
  2. Set the board (the default 4x4 board if --board is omitted) and print it
  3. Print every scorable word, or only the scored words with --score
  4. Print the total score
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordsearch.errors import IllegalStateError, InvalidArgumentError
from wordsearch.game import WordSearchGame
from wordsearch.settings import settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Word Search Solver")
    parser.add_argument("dictionary", help="Path to a whitespace-delimited word list")
    parser.add_argument("--board", nargs="+", default=None, metavar="TILE",
                        help="Tiles in row-major order; the count must be a perfect square")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--score", nargs="+", default=None, metavar="WORD",
                        help="Score these words instead of every word on the board")
    args = parser.parse_args(argv)

    game = WordSearchGame(max_board_size=settings.MAX_BOARD_SIZE)
    try:
        game.load_lexicon(args.dictionary)
        if args.board:
            game.set_board(args.board)
        print(game.render().lstrip("\n"))
        print()

        if args.score:
            words = args.score
            for word in words:
                path = game.is_on_board(word)
                status = "ok" if game.is_valid_word(word) and path else "--"
                print(f"  {status} {word.upper():<16} {path}")
        else:
            words = game.get_all_scorable_words(args.min_length)
            for word in words:
                print(f"  {word}")
            print(f"\n{len(words)} words")

        score = game.get_score_for_words(words, args.min_length)
        print(f"Score: {score}")
    except (InvalidArgumentError, IllegalStateError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
