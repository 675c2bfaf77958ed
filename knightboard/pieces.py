"""The six kinds of chess piece and the moves each may make."""

from __future__ import annotations

from typing import Protocol

from knightboard.move import Move, MoveType, PieceType
from knightboard.piece import Piece, _by_destination
from knightboard.position import Delta, Position

_ORTHOGONAL = (Delta(-1, 0), Delta(1, 0), Delta(0, -1), Delta(0, 1))
_DIAGONAL = (Delta(-1, 1), Delta(1, 1), Delta(-1, -1), Delta(1, -1))
_ALL_DIRECTIONS = _ORTHOGONAL + _DIAGONAL
_KNIGHT_JUMPS = (
    Delta(-1, 2), Delta(1, 2), Delta(-1, -2), Delta(1, -2),
    Delta(-2, 1), Delta(2, 1), Delta(-2, -1), Delta(2, -1),
)

_KING_SIDE_EMPTY = (5, 6)
_QUEEN_SIDE_EMPTY = (1, 2, 3)


class _Board(Protocol):
    def __getitem__(self, position: Position) -> Piece: ...

    def current_move(self) -> int: ...


class King(Piece):
    """The king: one step in any direction, or a castle."""

    def piece_type(self) -> PieceType:
        return PieceType.KING

    def get_moves(self, board: _Board) -> list[Move]:
        moves = self.jump_moves(_ALL_DIRECTIONS, board)
        if not self.is_moved() and self.position.is_valid():
            row = self.position.row
            if self._can_castle(board, row, 7, _KING_SIDE_EMPTY):
                moves.append(self._castle(Position(6, row), king_side=True))
            if self._can_castle(board, row, 0, _QUEEN_SIDE_EMPTY):
                moves.append(self._castle(Position(2, row), king_side=False))
        return _by_destination(moves)

    @staticmethod
    def _can_castle(board: _Board, row: int, rook_col: int, empty_cols: tuple[int, ...]) -> bool:
        if any(board[Position(col, row)].piece_type() is not PieceType.SPACE for col in empty_cols):
            return False
        rook = board[Position(rook_col, row)]
        return rook.piece_type() is PieceType.ROOK and not rook.is_moved()

    def _castle(self, dest: Position, king_side: bool) -> Move:
        move = Move(self.position, dest, self.white)
        move.set_castle(king_side)
        return move


class Queen(Piece):
    """The queen: slides in any direction."""

    def piece_type(self) -> PieceType:
        return PieceType.QUEEN

    def get_moves(self, board: _Board) -> list[Move]:
        return self.slide_moves(_ALL_DIRECTIONS, board)


class Rook(Piece):
    """The rook: slides along rows and columns."""

    def piece_type(self) -> PieceType:
        return PieceType.ROOK

    def get_moves(self, board: _Board) -> list[Move]:
        return self.slide_moves(_ORTHOGONAL, board)


class Bishop(Piece):
    """The bishop: slides along diagonals."""

    def piece_type(self) -> PieceType:
        return PieceType.BISHOP

    def get_moves(self, board: _Board) -> list[Move]:
        return self.slide_moves(_DIAGONAL, board)


class Knight(Piece):
    """The knight: jumps in an L shape."""

    def piece_type(self) -> PieceType:
        return PieceType.KNIGHT

    def get_moves(self, board: _Board) -> list[Move]:
        return self.jump_moves(_KNIGHT_JUMPS, board)


class Pawn(Piece):
    """The pawn: steps forward, captures diagonally, promotes to a queen."""

    def piece_type(self) -> PieceType:
        return PieceType.PAWN

    def get_moves(self, board: _Board) -> list[Move]:
        forward = 1 if self.white else -1
        last_row = 7 if self.white else 0
        here = self.position
        moves: list[Move] = []

        ahead = here + Delta(forward, 0)
        if ahead.is_valid() and board[ahead].piece_type() is PieceType.SPACE:
            promote = PieceType.QUEEN if ahead.row == last_row else PieceType.SPACE
            moves.append(Move(here, ahead, self.white, promote=promote))

        if not self.is_moved():
            double = Position(here.col, 3 if self.white else 4)
            passed = Position(here.col, 2 if self.white else 5)
            if (
                double.is_valid()
                and board[double].piece_type() is PieceType.SPACE
                and board[passed].piece_type() is PieceType.SPACE
            ):
                moves.append(Move(here, double, self.white))

        for side in (-1, 1):
            target = here + Delta(forward, side)
            if not target.is_valid():
                continue
            victim = board[target]
            if victim.piece_type() is not PieceType.SPACE and victim.white != self.white:
                promote = PieceType.QUEEN if target.row in (0, 7) else PieceType.SPACE
                moves.append(
                    Move(here, target, self.white, capture=victim.piece_type(), promote=promote)
                )

        if here.row == (4 if self.white else 3):
            for side in (-1, 1):
                dest = here + Delta(forward, side)
                beside = here + Delta(0, side)
                if not (dest.is_valid() and beside.is_valid()):
                    continue
                if board[dest].piece_type() is not PieceType.SPACE:
                    continue
                victim = board[beside]
                if (
                    victim.piece_type() is PieceType.PAWN
                    and victim.white != self.white
                    and victim.n_moves == 1
                    and victim.just_moved(board.current_move())
                ):
                    moves.append(
                        Move(
                            here,
                            dest,
                            self.white,
                            capture=PieceType.PAWN,
                            move_type=MoveType.ENPASSANT,
                        )
                    )
        return _by_destination(moves)