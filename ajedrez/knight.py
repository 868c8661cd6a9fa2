"""Landing-square checks for knight moves."""

from __future__ import annotations

from .board import BLACK_START, Board

_OWN_PIECE = "Estas intentando colocar el caballo en una pieza propia"


def check_white(board: Board, to_row: int, to_col: int) -> bool:
    """A white knight may land on an empty square or take a black piece."""
    if board.is_white(to_row, to_col):
        print(_OWN_PIECE)
        return False
    if board[to_row, to_col] >= BLACK_START:
        print("Caballo mata.")
        return True
    return board.is_empty(to_row, to_col)


def check_black(board: Board, to_row: int, to_col: int) -> bool:
    """A black knight may land on an empty square or take a white piece."""
    if board.is_black(to_row, to_col):
        print(_OWN_PIECE)
        return False
    if board.is_white(to_row, to_col):
        print("Caballo mata.")
        return True
    return board.is_empty(to_row, to_col)