"""Path checks for straight-line moves, one per side and direction."""

from __future__ import annotations

from .board import BLACK_START, COLS, EMPTY, ROWS, WHITE_END, WHITE_START, Board

_BLOCKED = "Estas pasando por encima de una pieza"


def _flat(board: Board, row: int, col: int) -> str:
    """Read a cell as if the grid were one row-major run; off the grid is empty."""
    index = row * COLS + col
    if 0 <= index < ROWS * COLS:
        return board[divmod(index, COLS)]
    return EMPTY


def _is_white_char(cell: str) -> bool:
    return WHITE_START <= cell <= WHITE_END


def _is_black_char(cell: str) -> bool:
    return BLACK_START <= cell <= "z"


def _report(blocked: bool) -> bool:
    if blocked:
        print(_BLOCKED)
    return blocked


def _finish(blocked: bool, captures: bool) -> bool:
    if captures and not blocked:
        print("Pieza comida")
        return True
    return not blocked


def _finish_black_target(board: Board, to_row: int, to_col: int, blocked: bool) -> bool:
    return _finish(blocked, board[to_row, to_col] >= BLACK_START)


def _finish_white_target(board: Board, to_row: int, to_col: int, blocked: bool) -> bool:
    return _finish(blocked, board.is_white(to_row, to_col))


def check_white_up(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for row in range(to_row, from_row):
        if board.is_white(row, from_col) or _flat(board, row + 1, from_col) >= BLACK_START:
            blocked = _report(True)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_white_down(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    # Only the square directly below the piece is examined.
    row = from_row + 1
    if row > to_row:
        return False
    blocked = _report(board.is_white(row, from_col) or _flat(board, row - 1, from_col) >= BLACK_START)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_white_right(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for col in range(from_col + 1, to_col + 1):
        if board.is_white(from_row, col) or _flat(board, from_row, col - 1) >= BLACK_START:
            blocked = _report(True)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_white_left(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for col in range(to_col, from_col):
        if board.is_white(from_row, col) or _flat(board, from_row, col + 1) >= BLACK_START:
            blocked = _report(True)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_black_up(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    # Only the square directly below the piece is examined.
    row = from_row + 1
    if row > to_row:
        return False
    blocked = _report(board.is_white(row, from_col) or _flat(board, row - 1, from_col) >= BLACK_START)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_black_down(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for row in range(to_row, from_row):
        if board.is_white(row, from_col) or _flat(board, row + 1, from_col) >= BLACK_START:
            blocked = _report(True)
    return _finish_black_target(board, to_row, to_col, blocked)


def check_black_right(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for col in range(from_col + 1, to_col + 1):
        if board.is_white(from_row, col) or _flat(board, from_row, col + 1) >= BLACK_START:
            blocked = _report(True)
    return _finish_white_target(board, to_row, to_col, blocked)


def check_black_left(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    blocked = False
    for col in range(to_col, from_col):
        if _is_black_char(_flat(board, from_row, col)) or _flat(board, from_row, col - 1) >= WHITE_START:
            blocked = _report(True)
    return _finish_white_target(board, to_row, to_col, blocked)