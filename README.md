# ajedrez

Chess rules for two players sharing one text board. The package keeps the
board, checks whether a move is allowed for the piece being moved, and
applies it, including pawn promotion and castling.

## The board

`ajedrez.board.Board` is a 9 × 9 grid of one-character strings. Row 0 and
column 0 hold the coordinate labels `1`–`8`, so squares are addressed with
1-based `(row, col)` pairs. White pieces are upper case and start on rows 7
and 8; black pieces are lower case and start on rows 1 and 2. An empty
square is `*`.

| Piece  | White | Black |
|--------|-------|-------|
| Pawn   | `P`   | `p`   |
| Rook   | `T`   | `t`   |
| Knight | `H`   | `h`   |
| Bishop | `B`   | `b`   |
| Queen  | `Q`   | `q`   |
| King   | `K`   | `k`   |

```python
from ajedrez.board import Board

board = Board.standard()
print(board.render())
```

```
  1 2 3 4 5 6 7 8
1 t h b q k b h t
2 p p p p p p p p
3 * * * * * * * *
...
8 T H B Q K B H T
```

`render()` writes every cell followed by a space, one line per row
(`str(board)` gives the same text). `Board.empty()` gives a board with only
the labels, and `place_pieces()` sets up the starting position on it.
Squares can be read and written with `board[row, col]`; `is_white`,
`is_black` and `is_empty` tell what stands on a square.

## Playing moves

The side to move is a `Color` (`Color.WHITE` is the string `"blancas"`,
`Color.BLACK` is `"negras"`); `Color.opponent()` or the function
`opponent(turn)` gives the other side. A `CastlingState` records whether
kings and rooks have moved, which decides whether castling is still
allowed; keep one for the whole game.

```python
from ajedrez.board import Board, CastlingState, Color
from ajedrez.rules import is_valid_move, move_piece

board = Board.standard()
state = CastlingState()
turn = Color.WHITE

# White pawn from row 7, column 5 two squares forward.
if is_valid_move(board, 7, 5, 5, 5, turn, state):
    move_piece(board, 7, 5, 5, 5, turn)
    turn = turn.opponent()
```

`is_valid_move` rejects coordinates outside the grid, empty origin squares
and pieces of the wrong colour, then applies the rule of the piece on the
origin square. `move_piece` moves the piece without checking it, and turns
a pawn that reaches row 1 or row 8 into a queen of the side to move.

The checks return `True` or `False`; when they turn a move down, or when a
piece is taken, they print a short message in Spanish to standard output
(for example `Estas pasando por encima de una pieza`).

## Castling

A king moving two columns along its row asks for castling. `king_move`
refuses it if the king or the rook on that side has moved according to the
`CastlingState`, or if the squares next to the king's target are all
occupied. It then calls `castling_safe`, which tries the opposing pieces
against each square between the king and its target; only the last of those
attempts decides the result. When castling is allowed, the rook is taken
off its home corner and put on row 8, column 6 (king side) or column 4
(queen side), for either colour; the king itself is moved by `move_piece`
as usual.

Rook moves away from a home corner are recorded in the `CastlingState` by
`rook_move`. Any one-square king step is recorded as `white_king_moved`,
whichever side makes it.

## Lower-level checks

Each piece's rules are available on their own:

- `ajedrez.pieces`: `pawn_move`, `rook_move`, `knight_move`,
  `bishop_move`, `queen_move`
- `ajedrez.rules`: `king_move`, `castling_safe`, `is_valid_move`,
  `move_piece`
- `ajedrez.pawn`: `check_forward`, `check_capture`, `promotes`
- `ajedrez.rook_paths`: `check_white_up`, `check_white_down`,
  `check_white_right`, `check_white_left` and the same four for black
- `ajedrez.bishop_paths`: `check_down_right`, `check_up_left`,
  `check_up_right`, `check_down_left`
- `ajedrez.knight`: `check_white`, `check_black`

They take the board, the origin and destination squares and, where it
matters, the side to move (and, for rooks and kings, the `CastlingState`),
and return `True` when the move is allowed.

## What is not included

There is no game to launch: the package has no command, no prompt that
reads moves from a player, no turn loop and no end-of-game detection. It
provides the board and the move rules; a front end that asks for
coordinates, calls `is_valid_move` and `move_piece`, and switches turns is
left to the caller, as in the example above.