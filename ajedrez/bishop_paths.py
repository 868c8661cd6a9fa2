"""Path checks for diagonal moves in each of the four directions."""

from __future__ import annotations

from collections.abc import Iterable

from .board import BLACK_START, EMPTY, WHITE_START, Board, Color


def _path_clear(board: Board, squares: Iterable[tuple[int, int]]) -> bool:
    if any(board[square] >= WHITE_START for square in squares):
        print("Estas pasando por encima de una pieza")
        return False
    return True


def _landing(board: Board, to_row: int, to_col: int, turn) -> bool:
    # The white and empty checks read the square on the main diagonal of the target row.
    diagonal = board[to_row, to_row]
    if (
        (turn == Color.WHITE and diagonal >= BLACK_START)
        or (turn == Color.BLACK and board.is_white(to_row, to_col))
        or diagonal == EMPTY
    ):
        print("Ficha puesta")
        return True
    return False


def check_down_right(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    squares = zip(range(from_row + 1, to_row), range(from_col + 1, to_col))
    return _path_clear(board, squares) and _landing(board, to_row, to_col, turn)


def check_up_left(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    squares = zip(range(to_row + 1, from_row), range(to_col + 1, from_col))
    return _path_clear(board, squares) and _landing(board, to_row, to_col, turn)


def check_up_right(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    squares = zip(range(from_row - 1, to_row, -1), range(from_col + 1, to_col))
    return _path_clear(board, squares) and _landing(board, to_row, to_col, turn)


def check_down_left(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    squares = zip(range(from_row + 1, to_row), range(from_col - 1, to_col, -1))
    return _path_clear(board, squares) and _landing(board, to_row, to_col, turn)