import copy

import pytest

from ajedrez.board import Board, CastlingState, Color
from ajedrez.rules import castling_safe, is_valid_move, king_move, move_piece


@pytest.fixture
def state():
    return CastlingState()


def _board_with(pieces):
    board = Board.empty()
    for square, piece in pieces.items():
        board[square] = piece
    return board


def test_move_piece_moves_and_clears_origin():
    board = Board.standard()
    move_piece(board, 7, 1, 5, 1, Color.WHITE)
    assert board[5, 1] == "P"
    assert board[7, 1] == "*"


def test_move_piece_promotes_white_pawn():
    board = _board_with({(2, 3): "P"})
    move_piece(board, 2, 3, 1, 3, Color.WHITE)
    assert board[1, 3] == "Q"
    assert board[2, 3] == "*"


def test_move_piece_promotes_black_pawn():
    board = _board_with({(7, 4): "p"})
    move_piece(board, 7, 4, 8, 4, Color.BLACK)
    assert board[8, 4] == "q"


def test_move_piece_keeps_non_pawn_on_last_row():
    board = _board_with({(2, 3): "T"})
    move_piece(board, 2, 3, 1, 3, Color.WHITE)
    assert board[1, 3] == "T"


def test_out_of_bounds_rejected(state):
    board = Board.standard()
    assert is_valid_move(board, 7, 1, 9, 1, Color.WHITE, state) is False
    assert is_valid_move(board, -1, 1, 5, 1, Color.WHITE, state) is False


def test_empty_origin_rejected(state):
    board = Board.standard()
    assert is_valid_move(board, 5, 5, 4, 5, Color.WHITE, state) is False


def test_moving_opponents_piece_rejected(state):
    board = Board.standard()
    before = copy.deepcopy(board.cells)
    assert is_valid_move(board, 2, 1, 3, 1, Color.WHITE, state) is False
    assert is_valid_move(board, 7, 1, 6, 1, Color.BLACK, state) is False
    assert board.cells == before


def test_opening_pawn_double_step_valid_and_board_untouched(state):
    board = Board.standard()
    before = copy.deepcopy(board.cells)
    assert is_valid_move(board, 7, 5, 5, 5, Color.WHITE, state) is True
    assert board.cells == before


def test_knights_can_jump_at_start(state):
    board = Board.standard()
    assert is_valid_move(board, 8, 2, 6, 3, Color.WHITE, state) is True
    assert is_valid_move(board, 1, 2, 3, 3, Color.BLACK, state) is True


def test_knight_bad_shape_rejected(state):
    board = Board.standard()
    assert is_valid_move(board, 8, 2, 6, 2, Color.WHITE, state) is False


def test_king_step_to_empty_marks_moved(state):
    board = _board_with({(5, 5): "K"})
    assert king_move(board, 5, 5, 4, 5, Color.WHITE, state) is True
    assert state.white_king_moved is True


def test_king_cannot_land_on_own_piece(state):
    board = _board_with({(5, 5): "K", (4, 4): "P"})
    assert king_move(board, 5, 5, 4, 4, Color.WHITE, state) is False
    assert state.white_king_moved is False


def test_king_captures_enemy(state):
    board = _board_with({(5, 5): "K", (5, 6): "p"})
    assert king_move(board, 5, 5, 5, 6, Color.WHITE, state) is True


def test_black_king_blocked_by_own_piece(state):
    board = _board_with({(3, 3): "k", (4, 3): "p"})
    assert king_move(board, 3, 3, 4, 3, Color.BLACK, state) is False


def test_king_long_step_rejected(state):
    board = _board_with({(5, 5): "K"})
    assert king_move(board, 5, 5, 3, 5, Color.WHITE, state) is False


def test_white_kingside_castling_moves_rook(state):
    board = _board_with({(8, 5): "K", (8, 8): "T"})
    assert king_move(board, 8, 5, 8, 7, Color.WHITE, state) is True
    assert board[8, 6] == "T"
    assert board[8, 8] == "*"
    assert board[8, 5] == "K"


def test_white_queenside_castling_moves_rook(state):
    board = _board_with({(8, 5): "K", (8, 1): "T"})
    assert king_move(board, 8, 5, 8, 3, Color.WHITE, state) is True
    assert board[8, 4] == "T"
    assert board[8, 1] == "*"


def test_castling_refused_after_king_moved(state):
    board = _board_with({(8, 5): "K", (8, 8): "T"})
    state.white_king_moved = True
    before = copy.deepcopy(board.cells)
    assert king_move(board, 8, 5, 8, 7, Color.WHITE, state) is False
    assert board.cells == before


def test_castling_refused_after_rook_moved(state):
    board = _board_with({(8, 5): "K", (8, 8): "T"})
    state.white_right_rook_moved = True
    assert king_move(board, 8, 5, 8, 7, Color.WHITE, state) is False
    assert board[8, 8] == "T"


def test_castling_refused_with_pieces_between(state):
    board = _board_with({(8, 5): "K", (8, 6): "B", (8, 7): "H", (8, 8): "T"})
    assert king_move(board, 8, 5, 8, 7, Color.WHITE, state) is False
    assert board[8, 8] == "T"


def test_castling_safe_without_attackers(state):
    board = _board_with({(8, 5): "K", (8, 8): "T"})
    assert castling_safe(board, 8, 5, 8, 7, Color.WHITE, True, state) is True


def test_castling_unsafe_when_rook_covers_target(state):
    board = _board_with({(8, 5): "K", (8, 8): "T", (2, 7): "t"})
    assert castling_safe(board, 8, 5, 8, 7, Color.WHITE, True, state) is False
    assert king_move(board, 8, 5, 8, 7, Color.WHITE, state) is False
    assert board[8, 8] == "T"
    assert board[8, 6] == "*"


def test_black_kingside_check_ignores_pieces(state):
    board = Board.standard()
    assert castling_safe(board, 1, 5, 1, 7, Color.BLACK, True, state) is True


def test_is_valid_move_routes_king_castling(state):
    board = _board_with({(8, 5): "K", (8, 8): "T"})
    assert is_valid_move(board, 8, 5, 8, 7, Color.WHITE, state) is True
    assert board[8, 6] == "T"