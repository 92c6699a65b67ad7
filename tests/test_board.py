import pytest
from wordsearch.board import Board, DEFAULT_TILES
from wordsearch.errors import InvalidArgumentError


def test_size_from_tile_count():
    assert Board(["A"] * 16).size == 4
    assert Board(["A"] * 25).size == 5
    assert Board(["A"]).size == 1


@pytest.mark.parametrize("count", [0, 2, 5, 15, 17])
def test_non_square_rejected(count):
    with pytest.raises(InvalidArgumentError):
        Board(["A"] * count)


def test_none_rejected():
    with pytest.raises(InvalidArgumentError):
        Board(None)
    with pytest.raises(InvalidArgumentError):
        Board(["A", None, "B", "C"])
    with pytest.raises(InvalidArgumentError):
        Board(["A", "", "B", "C"])


def test_max_size():
    Board(["A"] * 16, max_size=4)
    with pytest.raises(InvalidArgumentError):
        Board(["A"] * 25, max_size=4)


def test_tiles_uppercased():
    board = Board(["qu", "a", "b", "c"])
    assert board.tile_at(0) == "QU"
    assert board.word_for([0, 1]) == "QUA"


def test_row_major_positions():
    board = Board([str(i) for i in range(9)])
    assert board.row_col(0) == (0, 0)
    assert board.row_col(5) == (1, 2)
    assert board.index_of(2, 1) == 7
    assert board.tile_at(7) == "7"
    with pytest.raises(InvalidArgumentError):
        board.tile_at(9)
    with pytest.raises(InvalidArgumentError):
        board.index_of(3, 0)


def test_adjacent_corner():
    board = Board(["A"] * 16)
    assert board.adjacent_positions(0) == [1, 4, 5]
    assert board.adjacent_positions(15) == [10, 11, 14]


def test_adjacent_center_order():
    """Row offset outer, column offset inner."""
    board = Board(["A"] * 16)
    assert board.adjacent_positions(5) == [0, 1, 2, 4, 6, 8, 9, 10]


def test_adjacent_excluding():
    board = Board(["A"] * 16)
    assert board.adjacent_positions(5, excluding={0, 6, 10}) == [1, 2, 4, 8, 9]
    assert board.adjacent_positions(0, excluding=[1, 4, 5]) == []


def test_is_adjacent():
    board = Board(["A"] * 9)
    assert board.is_adjacent(0, 4)
    assert not board.is_adjacent(0, 2)
    assert not board.is_adjacent(4, 4)


def test_single_tile_has_no_neighbors():
    assert Board(["A"]).adjacent_positions(0) == []


def test_default_board_render():
    board = Board.default()
    assert board.tiles == DEFAULT_TILES
    assert board.render() == "\n| E E C A |\n| A L E P |\n| H N B O |\n| Q T T Y |"


def test_non_ascii_tiles_not_case_mapped():
    board = Board(["ﬁ", "n", "ß", "x"])
    assert board.tile_at(0) == "ﬁ"
    assert board.tile_at(1) == "N"
    assert board.tile_at(2) == "ß"
