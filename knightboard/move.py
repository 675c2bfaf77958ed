"""A single chess move and its short text form such as ``e5d6r``."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from knightboard.position import Position


class PieceType(Enum):
    SPACE = 0
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


class MoveType(Enum):
    MOVE = 0
    ENPASSANT = 1
    CASTLE_KING = 2
    CASTLE_QUEEN = 3
    MOVE_ERROR = 4


_LETTERS = {
    PieceType.KING: "k",
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
    PieceType.PAWN: "p",
}
_PIECES = {letter: piece for piece, letter in _LETTERS.items()}

_MOVE_TYPE_LETTERS = {
    MoveType.ENPASSANT: "E",
    MoveType.CASTLE_KING: "c",
    MoveType.CASTLE_QUEEN: "C",
}
_MOVE_TYPES = {letter: kind for kind, letter in _MOVE_TYPE_LETTERS.items()}


def letter_from_piece_type(piece_type: PieceType) -> str:
    """Return the lower-case letter of a piece, or a blank for a space."""
    return _LETTERS.get(piece_type, " ")


def piece_type_from_letter(letter: str) -> PieceType:
    """Return the piece named by a lower-case letter, or SPACE."""
    return _PIECES.get(letter, PieceType.SPACE)


def _square(col_char: str, row_char: str) -> Position:
    return Position(ord(col_char) - ord("a"), ord(row_char.lower()) - ord("1"))


@dataclass
class Move:
    """One move across the board.

    Moves order by their destination square alone.
    """

    source: Position = field(default_factory=Position.invalid)
    dest: Position = field(default_factory=Position.invalid)
    white: bool = True
    capture: PieceType = PieceType.SPACE
    move_type: MoveType = MoveType.MOVE
    promote: PieceType = PieceType.SPACE

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read a move such as ``e5e6``, ``e5d6r``, ``e5f6E`` or ``e1g1c``.

        Text shorter than four characters leaves both squares invalid.
        """
        move = cls()
        if len(text) < 4:
            return move
        move.source = _square(text[0], text[1])
        move.dest = _square(text[2], text[3])
        if len(text) == 5:
            extra = text[4]
            if extra in _PIECES:
                move.capture = _PIECES[extra]
            elif extra in _MOVE_TYPES:
                move.move_type = _MOVE_TYPES[extra]
            else:
                move.promote = piece_type_from_letter(extra)
        return move

    def text(self) -> str:
        """Return the short text form, or ``"Invalid Move"``."""
        if not (self.source.is_valid() and self.dest.is_valid()):
            return "Invalid Move"
        result = str(self.source) + str(self.dest)
        if self.move_type is not MoveType.MOVE:
            return result + self.move_type_char()
        if self.capture is not PieceType.SPACE:
            return result + self.capture_char()
        return result

    def set_castle(self, king_side: bool) -> None:
        self.move_type = MoveType.CASTLE_KING if king_side else MoveType.CASTLE_QUEEN

    def set_en_passant(self) -> None:
        self.move_type = MoveType.ENPASSANT

    def move_type_char(self) -> str:
        """Return the suffix letter of the move type; empty for a plain move."""
        if self.move_type is MoveType.MOVE_ERROR:
            raise ValueError("an erroneous move has no text form")
        return _MOVE_TYPE_LETTERS.get(self.move_type, "")

    def capture_char(self) -> str:
        return letter_from_piece_type(self.capture)

    def __lt__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.dest.location() < other.dest.location()

    def __str__(self) -> str:
        return self.text()