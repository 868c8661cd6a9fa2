"""Board grid, player colours and castling bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROWS = 9
COLS = 9

EMPTY = "*"
SPACE = " "

WHITE_START = "A"
WHITE_END = "Z"
BLACK_START = "a"
BLACK_END = "z"

WHITE_QUEEN = "Q"
BLACK_QUEEN = "q"
WHITE_KING = "K"
BLACK_KING = "k"
WHITE_ROOK = "T"
BLACK_ROOK = "t"

WHITE_LEFT_ROOK = (8, 1)
WHITE_RIGHT_ROOK = (8, 8)
BLACK_LEFT_ROOK = (1, 1)
BLACK_RIGHT_ROOK = (1, 8)

BACK_RANK = "THBQKBHT"
PAWN_RANK = "PPPPPPPP"


class Color(str, Enum):
    """The side whose turn it is."""

    WHITE = "blancas"
    BLACK = "negras"

    def opponent(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE


def opponent(turn: Color | str) -> Color:
    """Return the other side; anything that is not white counts as black."""
    return Color.BLACK if turn == Color.WHITE else Color.WHITE


@dataclass
class CastlingState:
    """Tracks which kings and rooks have moved, for castling."""

    white_king_moved: bool = False
    black_king_moved: bool = False
    white_left_rook_moved: bool = False
    white_right_rook_moved: bool = False
    black_left_rook_moved: bool = False
    black_right_rook_moved: bool = False


def _header_cell(row: int, col: int) -> str:
    if row == 0 and col != 0:
        return str(col)
    if col == 0 and row != 0:
        return str(row)
    return EMPTY


@dataclass
class Board:
    """A 9x9 grid: row 0 and column 0 hold coordinates, the rest the squares."""

    cells: list[list[str]]

    @classmethod
    def empty(cls) -> Board:
        cells = [[_header_cell(row, col) for col in range(COLS)] for row in range(ROWS)]
        cells[0][0] = SPACE
        return cls(cells)

    @classmethod
    def standard(cls) -> Board:
        board = cls.empty()
        board.place_pieces()
        return board

    def place_pieces(self) -> None:
        """Put both armies on their starting squares."""
        self.cells[7][1:] = list(PAWN_RANK)
        self.cells[8][1:] = list(BACK_RANK)
        self.cells[1][1:] = list(BACK_RANK.lower())
        self.cells[2][1:] = list(PAWN_RANK.lower())

    def render(self) -> str:
        return "".join("".join(f"{cell}{SPACE}" for cell in row) + "\n" for row in self.cells)

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self.cells[row][col]

    def __setitem__(self, position: tuple[int, int], piece: str) -> None:
        row, col = position
        self.cells[row][col] = piece

    def __str__(self) -> str:
        return self.render()

    def is_white(self, row: int, col: int) -> bool:
        return WHITE_START <= self.cells[row][col] <= WHITE_END

    def is_black(self, row: int, col: int) -> bool:
        return BLACK_START <= self.cells[row][col] <= BLACK_END

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY