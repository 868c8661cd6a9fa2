"""Move rules for pawns, rooks, knights, bishops and queens."""

from __future__ import annotations

from collections.abc import Callable

from . import bishop_paths, knight, pawn, rook_paths
from .board import (
    BLACK_LEFT_ROOK,
    BLACK_RIGHT_ROOK,
    WHITE_LEFT_ROOK,
    WHITE_RIGHT_ROOK,
    Board,
    CastlingState,
    Color,
)

_StraightCheck = Callable[[Board, int, int, int, int], bool]
_DiagonalCheck = Callable[[Board, int, int, int, int, object], bool]


def _straight_check(from_row: int, from_col: int, to_row: int, to_col: int, white: bool) -> _StraightCheck | None:
    """Pick the path check for a vertical or lateral move, or None if it is neither."""
    vertical = from_row != to_row and from_col == to_col
    lateral = from_row == to_row and from_col != to_col
    if vertical:
        if to_row < from_row:
            return rook_paths.check_white_up if white else rook_paths.check_black_up
        return rook_paths.check_white_down if white else rook_paths.check_black_down
    if lateral:
        if to_col > from_col:
            return rook_paths.check_white_right if white else rook_paths.check_black_right
        return rook_paths.check_white_left if white else rook_paths.check_black_left
    return None


def _diagonal_check(from_row: int, from_col: int, to_row: int, to_col: int) -> _DiagonalCheck | None:
    """Pick the path check for a diagonal move, or None if the move is not diagonal."""
    rows = to_row - from_row
    cols = to_col - from_col
    if rows == 0 or abs(rows) != abs(cols):
        return None
    if rows > 0:
        return bishop_paths.check_down_right if cols > 0 else bishop_paths.check_down_left
    return bishop_paths.check_up_right if cols > 0 else bishop_paths.check_up_left


def _mark_rook_moved(state: CastlingState, white: bool, row: int, col: int) -> None:
    square = (row, col)
    if white:
        if square == WHITE_LEFT_ROOK:
            state.white_left_rook_moved = True
        if square == WHITE_RIGHT_ROOK:
            state.white_right_rook_moved = True
    else:
        if square == BLACK_LEFT_ROOK:
            state.black_left_rook_moved = True
        if square == BLACK_RIGHT_ROOK:
            state.black_right_rook_moved = True


def pawn_move(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """A pawn either advances straight or captures diagonally."""
    if from_col != to_col:
        return pawn.check_capture(board, from_row, from_col, to_row, to_col, turn)
    return pawn.check_forward(board, from_row, from_col, to_row, to_col, turn)


def rook_move(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn, state: CastlingState
) -> bool:
    """Check a rook move and record in ``state`` when a home rook leaves its square."""
    white = turn == Color.WHITE
    check = _straight_check(from_row, from_col, to_row, to_col, white)
    if check is None:
        print("No puedes mover la torre en diagonal")
        return False

    ok = check(board, from_row, from_col, to_row, to_col)
    # A white rook moving down or a black rook moving up cannot be leaving its home square.
    untracked = check in (rook_paths.check_white_down, rook_paths.check_black_up)
    if ok and not untracked:
        _mark_rook_moved(state, white, from_row, from_col)
    return ok


def knight_move(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """A knight jumps two squares one way and one square the other."""
    shape = {abs(from_row - to_row), abs(from_col - to_col)}
    if shape != {1, 2}:
        print("Caballo no puede hacer ese movimiento")
        return False
    if turn == Color.WHITE:
        return knight.check_white(board, to_row, to_col)
    return knight.check_black(board, to_row, to_col)


def bishop_move(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """A bishop moves any distance along a diagonal."""
    check = _diagonal_check(from_row, from_col, to_row, to_col)
    if check is None:
        print("El alfil no puede hacer este movimiento.")
        return False
    return check(board, from_row, from_col, to_row, to_col, turn)


def queen_move(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """A queen moves like a bishop or like a rook."""
    diagonal = _diagonal_check(from_row, from_col, to_row, to_col)
    if diagonal is not None:
        return diagonal(board, from_row, from_col, to_row, to_col, turn)
    straight = _straight_check(from_row, from_col, to_row, to_col, turn == Color.WHITE)
    if straight is not None:
        return straight(board, from_row, from_col, to_row, to_col)
    print("La reina no puede hacer este movimiento.")
    return False