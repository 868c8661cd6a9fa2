"""King moves, castling, move validation and applying a move to the board."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from . import pieces
from .board import (
    BLACK_LEFT_ROOK,
    BLACK_QUEEN,
    BLACK_RIGHT_ROOK,
    BLACK_ROOK,
    COLS,
    EMPTY,
    ROWS,
    WHITE_LEFT_ROOK,
    WHITE_QUEEN,
    WHITE_RIGHT_ROOK,
    WHITE_ROOK,
    Board,
    CastlingState,
    Color,
    opponent,
)
from .pawn import promotes

# Squares where a castled rook ends up; both sides use the white back row.
RIGHT_ROOK_TARGET = (8, 6)
LEFT_ROOK_TARGET = (8, 4)

_MoveRule = Callable[[Board, int, int, int, int, object], bool]


def _piece_rules(state: CastlingState) -> dict[str, _MoveRule]:
    """Move rule for each piece letter, keyed by its lower-case form."""
    return {
        "p": pieces.pawn_move,
        "t": partial(pieces.rook_move, state=state),
        "h": pieces.knight_move,
        "b": pieces.bishop_move,
        "q": pieces.queen_move,
        "k": partial(king_move, state=state),
    }


def castling_safe(
    board: Board,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
    turn,
    kingside: bool,
    state: CastlingState,
) -> bool:
    """Check whether the squares the king crosses are free from attack.

    Every lower-case piece on the board is tried against each square between
    the king and its target, with the opponent's turn; only the last attempt
    decides the outcome.
    """
    rules = _piece_rules(state)
    if turn != Color.WHITE and kingside:
        rules = {letter.upper(): rule for letter, rule in rules.items()}
    checker = opponent(turn)
    columns = range(from_col, to_col + 1) if kingside else range(to_col, from_col + 1)

    attacked = False
    for col in columns:
        for row, cells in enumerate(board.cells):
            for piece_col, cell in enumerate(cells):
                if not board.is_black(row, piece_col):
                    continue
                rule = rules.get(cell)
                if rule is not None:
                    attacked = rule(board, row, piece_col, to_row, col, checker)
    return not attacked


def _step(board: Board, to_row: int, to_col: int, white: bool, state: CastlingState) -> bool | None:
    """Outcome of a one-square king step, or None if the target is not a playing square."""
    if board.is_empty(to_row, to_col):
        # Any king step, white or black, marks the white king as moved.
        state.white_king_moved = True
        return True
    own = board.is_white if white else board.is_black
    enemy = board.is_black if white else board.is_white
    if own(to_row, to_col):
        print("Estas pasando por encima de una pieza propia")
        return False
    if enemy(to_row, to_col):
        state.white_king_moved = True
        print("Rey Mata")
        return True
    return None


def _castle(
    board: Board,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
    turn,
    kingside: bool,
    state: CastlingState,
) -> bool:
    white = turn == Color.WHITE
    if white:
        rook_moved = state.white_right_rook_moved if kingside else state.white_left_rook_moved
        king_moved = state.white_king_moved
    else:
        rook_moved = state.black_right_rook_moved if kingside else state.black_left_rook_moved
        king_moved = state.black_king_moved
    if king_moved or rook_moved:
        print(" No puedes hacer enroque ficha movida previamente")
        return False

    if kingside:
        between = [(to_row, to_col), (to_row, to_col - 1)]
    else:
        between = [(to_row, to_col), (to_row, from_col - 1), (to_row, to_col + 1)]
    if all(board[square] != EMPTY for square in between):
        print(" Estas intentando enrrocar con piezas por el medio")
        return False

    if not castling_safe(board, from_row, from_col, to_row, to_col, turn, kingside, state):
        return False

    rook = WHITE_ROOK if white else BLACK_ROOK
    if kingside:
        home = WHITE_RIGHT_ROOK if white else BLACK_RIGHT_ROOK
        board[RIGHT_ROOK_TARGET] = rook
    else:
        home = WHITE_LEFT_ROOK if white else BLACK_LEFT_ROOK
        board[LEFT_ROOK_TARGET] = rook
    board[home] = EMPTY
    return True


def king_move(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn, state: CastlingState
) -> bool:
    """Check a king step or castling; castling moves the rook on the board."""
    rows = abs(from_row - to_row)
    cols = abs(from_col - to_col)
    vertical = rows == 1 and cols == 0
    lateral = cols == 1 and rows == 0
    diagonal = rows == 1 and cols == 1
    same_row = from_row == to_row
    kingside = same_row and to_col - from_col == 2
    queenside = same_row and from_col - to_col == 2

    if vertical or lateral or diagonal:
        outcome = _step(board, to_row, to_col, turn == Color.WHITE, state)
        if outcome is not None:
            return outcome
        return False
    if kingside or queenside:
        return _castle(board, from_row, from_col, to_row, to_col, turn, kingside, state)
    return False


def is_valid_move(
    board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn, state: CastlingState
) -> bool:
    """Check that a move stays on the board, moves one's own piece and obeys its rule."""
    if not all(0 <= value < limit for value, limit in (
        (from_row, ROWS), (from_col, COLS), (to_row, ROWS), (to_col, COLS)
    )):
        print("Posicion insertada no esta dentro del tablero")
        return False
    if board.is_empty(from_row, from_col):
        print("Posicion insertada no hay nada")
        return False
    if (turn == Color.WHITE and board.is_black(from_row, from_col)) or (
        turn == Color.BLACK and board.is_white(from_row, from_col)
    ):
        print("Estas intentando cambiar una ficha que no te pertenece")
        return False

    rule = _piece_rules(state).get(board[from_row, from_col].lower())
    if rule is None:
        return False
    return rule(board, from_row, from_col, to_row, to_col, turn)


def move_piece(board: Board, from_row: int, from_col: int, to_row: int, to_col: int, turn) -> None:
    """Move a piece, turning a pawn that reaches the last row into a queen."""
    if promotes(board, from_row, from_col, to_row, to_col):
        piece = WHITE_QUEEN if turn == Color.WHITE else BLACK_QUEEN
    else:
        piece = board[from_row, from_col]
    board[from_row, from_col] = EMPTY
    board[to_row, to_col] = piece