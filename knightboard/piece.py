"""The piece base class and the empty square."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from knightboard.move import Move, PieceType
from knightboard.position import Delta, Position


class _Board(Protocol):
    def __getitem__(self, position: Position) -> Piece: ...


def _by_destination(moves: Iterable[Move]) -> list[Move]:
    """Keep the first move to each destination, ordered by destination."""
    unique: dict[int, Move] = {}
    for move in moves:
        unique.setdefault(move.dest.location(), move)
    return [unique[key] for key in sorted(unique)]


class Piece(ABC):
    """A piece on the board: where it stands, its colour and its history."""

    def __init__(self, position: Position | None = None, white: bool = True) -> None:
        self.position = position if position is not None else Position(0, 0)
        self.white = white
        self.n_moves = 0
        self.last_move = 0

    @abstractmethod
    def piece_type(self) -> PieceType:
        """The kind of piece this is."""

    def is_moved(self) -> bool:
        return self.n_moves > 0

    def just_moved(self, current_move: int) -> bool:
        """True if this piece moved within the last two turns."""
        return current_move - self.last_move <= 2

    def record_move(self, position: Position, current_move: int) -> None:
        """Place the piece on ``position`` as the move numbered ``current_move``."""
        self.position = position
        self.last_move = current_move
        self.n_moves += 1

    def jump_moves(self, deltas: Iterable[Delta], board: _Board) -> list[Move]:
        """Moves one step along each delta onto empty or enemy squares."""
        found = []
        for delta in deltas:
            square = self.position + delta
            if not square.is_valid():
                continue
            target = board[square]
            target_type = target.piece_type()
            if target_type is PieceType.SPACE or target.white != self.white:
                found.append(Move(self.position, square, self.white, capture=target_type))
        return _by_destination(found)

    def slide_moves(self, deltas: Iterable[Delta], board: _Board) -> list[Move]:
        """Moves along each delta until blocked, capturing the first enemy met."""
        found = []
        for delta in deltas:
            square = self.position + delta
            while square.is_valid() and board[square].piece_type() is PieceType.SPACE:
                found.append(Move(self.position, square, self.white))
                square = square + delta
            if square.is_valid():
                target = board[square]
                if target.white != self.white:
                    found.append(
                        Move(self.position, square, self.white, capture=target.piece_type())
                    )
        return _by_destination(found)

    def get_moves(self, board: _Board) -> list[Move]:
        """All moves this piece may make; none unless a subclass says otherwise."""
        return []

    def __repr__(self) -> str:
        colour = "white" if self.white else "black"
        return f"{type(self).__name__}({self.position!s}, {colour})"


class Space(Piece):
    """An empty square."""

    def __init__(self, position: Position | None = None) -> None:
        super().__init__(position, True)

    def piece_type(self) -> PieceType:
        return PieceType.SPACE