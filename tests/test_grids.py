import pytest

from leetcrust.grids import (
    find_diagonal_order,
    first_complete_index,
    game_of_life,
    is_valid_sudoku,
    rotate,
    sort_matrix,
    trap_rain_water,
)


def test_game_of_life_example_1():
    board = [[0, 1, 0], [0, 0, 1], [1, 1, 1], [0, 0, 0]]
    game_of_life(board)
    assert board == [[0, 0, 0], [1, 0, 1], [0, 1, 1], [0, 1, 0]]


def test_game_of_life_example_2():
    board = [[1, 1], [1, 0]]
    game_of_life(board)
    assert board == [[1, 1], [1, 1]]


def test_game_of_life_blinker_period_two():
    board = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    game_of_life(board)
    assert board == [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
    game_of_life(board)
    assert board == [[0, 0, 0], [1, 1, 1], [0, 0, 0]]


_VALID_BOARD = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
]


def test_is_valid_sudoku_example_1():
    assert is_valid_sudoku(_VALID_BOARD) is True


def test_is_valid_sudoku_example_2():
    board = [list(row) for row in _VALID_BOARD]
    board[0][0] = "8"
    assert is_valid_sudoku(board) is False


def test_is_valid_sudoku_row_duplicate():
    board = [["."] * 9 for _ in range(9)]
    board[4][0] = "3"
    board[4][8] = "3"
    assert is_valid_sudoku(board) is False


def test_is_valid_sudoku_empty_board():
    assert is_valid_sudoku([["."] * 9 for _ in range(9)]) is True


def test_is_valid_sudoku_rejects_bad_cell():
    board = [["."] * 9 for _ in range(9)]
    board[0][0] = "0"
    with pytest.raises(ValueError):
        is_valid_sudoku(board)


def test_trap_rain_water_example_1():
    height_map = [
        [1, 4, 3, 1, 3, 2],
        [3, 2, 1, 3, 2, 4],
        [2, 3, 3, 2, 3, 1],
    ]
    assert trap_rain_water(height_map) == 4


def test_trap_rain_water_example_2():
    height_map = [
        [3, 3, 3, 3, 3],
        [3, 2, 2, 2, 3],
        [3, 2, 1, 2, 3],
        [3, 2, 2, 2, 3],
        [3, 3, 3, 3, 3],
    ]
    assert trap_rain_water(height_map) == 10


def test_trap_rain_water_does_not_modify_input():
    height_map = [[3, 3, 3], [3, 0, 3], [3, 3, 3]]
    assert trap_rain_water(height_map) == 3
    assert height_map == [[3, 3, 3], [3, 0, 3], [3, 3, 3]]


def test_rotate_example_1():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_example_2():
    matrix = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    rotate(matrix)
    assert matrix == [
        [15, 13, 2, 5],
        [14, 3, 4, 1],
        [12, 6, 8, 9],
        [16, 7, 10, 11],
    ]


def test_rotate_four_times_is_identity():
    original = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    matrix = [list(row) for row in original]
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_find_diagonal_order_example_1():
    assert find_diagonal_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [
        1, 2, 4, 7, 5, 3, 6, 8, 9,
    ]


def test_find_diagonal_order_example_2():
    assert find_diagonal_order([[1, 2], [3, 4]]) == [1, 2, 3, 4]


def test_find_diagonal_order_visits_every_cell_once():
    mat = [[1, 2, 3, 4], [5, 6, 7, 8]]
    assert sorted(find_diagonal_order(mat)) == list(range(1, 9))


def test_sort_matrix_example_1():
    assert sort_matrix([[1, 7, 3], [9, 8, 2], [4, 5, 6]]) == [
        [8, 2, 3],
        [9, 6, 7],
        [4, 5, 1],
    ]


def test_sort_matrix_example_2():
    assert sort_matrix([[0, 1], [1, 2]]) == [[2, 1], [1, 0]]


def test_sort_matrix_example_3():
    assert sort_matrix([[1]]) == [[1]]


def test_first_complete_index_example_1():
    assert first_complete_index([1, 3, 4, 2], [[1, 4], [2, 3]]) == 2


def test_first_complete_index_example_2():
    arr = [2, 8, 7, 4, 1, 3, 5, 6, 9]
    mat = [[3, 2, 5], [1, 4, 6], [8, 7, 9]]
    assert first_complete_index(arr, mat) == 3


def test_first_complete_index_never_complete():
    with pytest.raises(ValueError):
        first_complete_index([1], [[1, 2], [3, 4]])