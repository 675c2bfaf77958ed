"""The board: an 8x8 grid of pieces and a count of moves played."""

from __future__ import annotations

from collections.abc import Iterator

from knightboard.move import Move, PieceType
from knightboard.piece import Piece, Space
from knightboard.position import BOARD_SIZE, Position
from knightboard.pieces import Knight

_SQUARES = BOARD_SIZE * BOARD_SIZE

# Knights of the opening set-up: (column, row, white)
_START = (
    (1, 0, True),
    (6, 0, True),
    (1, 7, False),
    (6, 7, False),
)


def _index(position: Position) -> int:
    if not position.is_valid():
        raise IndexError("position is off the board")
    return position.location()


class Board:
    """A collection of pieces and a small amount of game state."""

    def __init__(self, reset: bool = True) -> None:
        self.num_moves = 0
        self._squares: list[Piece | None] = [None] * _SQUARES
        if reset:
            self.reset()
        else:
            self.clear()

    def clear(self) -> None:
        """Fill every square with an empty space."""
        self._squares = [Space(Position.from_location(loc)) for loc in range(_SQUARES)]

    def reset(self) -> None:
        """Set up the opening position: a pair of knights on each side."""
        self.clear()
        self.num_moves = 0
        for col, row, white in _START:
            square = Position(col, row)
            self[square] = Knight(square, white)

    def current_move(self) -> int:
        return self.num_moves

    def white_turn(self) -> bool:
        return self.num_moves % 2 == 0

    def __getitem__(self, position: Position) -> Piece:
        piece = self._squares[_index(position)]
        if piece is None:
            raise LookupError(f"no piece stored at {position}")
        return piece

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self._squares[_index(position)] = piece

    def pieces(self) -> Iterator[Piece]:
        """Every piece on the board that is not an empty space, column by column."""
        for col in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                piece = self._squares[Position(col, row).location()]
                if piece is not None and piece.piece_type() is not PieceType.SPACE:
                    yield piece

    def move(self, move: Move) -> None:
        """Carry out ``move``: the piece leaves a space behind and the count goes up."""
        source, dest = move.source, move.dest
        if not (source.is_valid() and dest.is_valid()):
            raise ValueError(f"cannot play a move with an invalid square: {move!r}")
        piece = self[source]
        self[dest] = piece
        self[source] = Space(source)
        piece.record_move(dest, self.num_moves)
        self.num_moves += 1


class BoardEmpty(Board):
    """A board holding nothing; every unfilled square reads as one shared space."""

    def __init__(self) -> None:
        super().__init__(reset=False)
        self._squares = [None] * _SQUARES
        self._space = Space()

    def __getitem__(self, position: Position) -> Piece:
        piece = self._squares[_index(position)]
        return piece if piece is not None else self._space