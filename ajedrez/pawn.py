"""Pawn move checks: straight advances, diagonal captures and promotion."""

from __future__ import annotations

from .board import BLACK_START, EMPTY, Board, Color

WHITE_START_ROW = 7
BLACK_START_ROW = 2
PROMOTION_ROWS = (1, 8)


def check_forward(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """Check a straight pawn advance of one square, or two from the start row."""
    if turn == Color.WHITE:
        if from_row == WHITE_START_ROW:
            if to_row not in (from_row - 1, from_row - 2):
                print("Estas intentando mover el peon en una direcion no posible (1)")
                return False
        elif to_row != from_row - 1:
            print("Estas intentando mover el peon en una direcion no posible (2)")
            return False
        path = range(to_row, from_row)
    else:
        if from_row == BLACK_START_ROW:
            if to_row not in (from_row + 1, from_row + 2):
                print("Estas intentando mover el peon en una direcion no posible 1")
                return False
        elif to_row != from_row + 1:
            print("Estas intentando mover el peon en una direcion no posible 2")
            return False
        path = range(from_row + 1, to_row + 1)

    if any(board[row, from_col] != EMPTY for row in path):
        print("Estas pasando por encima de una pieza")
        return False
    return True


def check_capture(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> bool:
    """Check a one-square diagonal pawn move, which must take an enemy piece."""
    if to_row not in (from_row + 1, from_row - 1) or to_col not in (from_col + 1, from_col - 1):
        print("El movimiento no lateral no puede exceder 1")
        return False
    target = board[to_row, to_col]
    if turn == Color.WHITE:
        takes = target != EMPTY and target >= BLACK_START
    else:
        takes = target != EMPTY and board.is_white(to_row, to_col)
    if takes:
        print("El peon mata.")
        return True
    print("El peon pasa de largo y por encima de otra ficha.")
    return False


def promotes(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
    """True when a pawn lands on the first or last row."""
    return board[from_row, from_col] in ("P", "p") and to_row in PROMOTION_ROWS