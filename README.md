# knightboard

A small chess board model. It covers squares, moves in coordinate notation,
pieces that work out the moves open to them, and a board that carries moves out.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Positions

`knightboard.position.Position(col, row)` names a square. Columns and rows run
from 0 to 7. A square off the board is not an error. It becomes the invalid
position:

```python
from knightboard.position import Position, Delta

e4 = Position.from_text("e4")
e4.col, e4.row                  # (4, 3)
e4.location()                   # row * 8 + col == 28
str(e4)                         # "e4"
(e4 + Delta(1, 0)).is_valid()   # True: one row up
Position(8, 0).is_valid()       # False
str(Position.invalid())         # "invalid"
```

Other ways to build a position:

- `Position.from_location(n)` takes `n` from 0 to 63.
- `Position.from_xy(x, y, square_width, square_height)` takes screen pixels on
  a board with a one-square margin.

`pixel_x` and `pixel_y` go the other way, from a square to pixels.

## Moves

`knightboard.move.Move.parse` reads these forms:

| Text    | Meaning                   |
|---------|---------------------------|
| `e5e6`  | plain move                |
| `e5d6r` | move that captures a rook |
| `e5f6E` | en passant                |
| `e1g1c` | king-side castle          |
| `e1c1C` | queen-side castle         |

`Move.text()` writes the move back in the same form:

```python
from knightboard.move import Move, MoveType, PieceType

move = Move.parse("e5d6r")
move.capture is PieceType.ROOK      # True
move.move_type is MoveType.MOVE     # True
move.text()                         # "e5d6r"
```

If either square is invalid, `text()` returns `"Invalid Move"`. Moves sort by
their destination square.

`letter_from_piece_type` and `piece_type_from_letter` convert between
`PieceType` values and the letters `k q r b n p`.

## Pieces

`knightboard.pieces` holds six piece classes: `King`, `Queen`, `Rook`,
`Bishop`, `Knight` and `Pawn`. Each takes a `Position` and a colour (`True`
for white). `get_moves(board)` returns a list of `Move` objects, at most one
per destination square, sorted by destination.

- Sliding pieces stop at the first occupied square and capture it if it is an
  enemy.
- The king can also castle when:
  - it has not moved,
  - the rook on that side has not moved,
  - the squares between them are empty.
- The pawn can:
  - step forward one square,
  - step two squares on its first move,
  - capture diagonally,
  - take en passant.

  A pawn that reaches the last row carries a queen promotion.

`knightboard.piece.Piece` is the base class. `Space` is the empty square.

## Boards

`knightboard.board.Board` is an 8x8 grid indexed by `Position`.

- `Board()` starts from the opening set-up this package uses: a pair of knights
  for each side.
- `Board(reset=False)` starts with every square empty.
- `board.move(move)` carries a move out:
  - the piece goes to the destination square,
  - a `Space` is left behind,
  - the move count goes up.
- `current_move()` returns the move count.
- `white_turn()` is true when that count is even.
- `pieces()` yields every piece that is not a space.

`BoardEmpty` is a board on which every unfilled square reads as an empty space:

```python
from knightboard.board import BoardEmpty
from knightboard.pieces import Knight
from knightboard.position import Position

board = BoardEmpty()
knight = Knight(Position(3, 3), True)
board[knight.position] = knight
len(knight.get_moves(board))   # 8
```

## What it does not do

This package is a model only.

- It has no screen, drawing, command or game loop.
- The opening set-up places knights only, not a full set of pieces.
- Move generation does not test for check.
- `Board.move` moves the one piece named by the move and nothing else. It does
  not:
  - move the rook when castling,
  - remove a pawn taken en passant,
  - replace a promoted pawn,
  - check whose turn it is.