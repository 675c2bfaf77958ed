"""Squares on a chess board, packed into a single column/row byte."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
SIZE_SQUARE = 32  # default pixel size of one square

_INVALID = 0xFF
_INVALID_MASK = 0x88


@dataclass(frozen=True)
class Delta:
    """An offset in rows and columns."""

    d_row: int
    d_col: int


ADD_R = Delta(1, 0)
ADD_C = Delta(0, 1)
SUB_R = Delta(-1, 0)
SUB_C = Delta(0, -1)


def _on_board(col: int, row: int) -> bool:
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


class Position:
    """An immutable square on the board, or the invalid position.

    The column lives in the high nibble and the row in the low nibble of
    one byte; any coordinate off the board yields the invalid position.
    """

    __slots__ = ("_col_row",)

    def __init__(self, col: int, row: int) -> None:
        if _on_board(col, row):
            self._col_row = (col << 4) | row
        else:
            self._col_row = _INVALID

    @classmethod
    def invalid(cls) -> Position:
        """Return the position that lies off the board."""
        return cls(-1, -1)

    @classmethod
    def from_location(cls, location: int) -> Position:
        """Build from a location 0..63, counting row 0 first."""
        row, col = divmod(location, BOARD_SIZE)
        return cls(col, row)

    @classmethod
    def from_text(cls, text: str) -> Position:
        """Build from algebraic text such as ``"d4"``; anything else is invalid."""
        if len(text) == 2:
            col_char, row_char = text
            if "a" <= col_char <= "h" and "1" <= row_char <= "8":
                return cls(ord(col_char) - ord("a"), ord(row_char) - ord("1"))
        return cls.invalid()

    @classmethod
    def from_xy(
        cls,
        x: float,
        y: float,
        square_width: float = SIZE_SQUARE,
        square_height: float = SIZE_SQUARE,
    ) -> Position:
        """Build from screen pixels; the board has a one-square margin."""
        if square_width <= 0 or square_height <= 0:
            raise ValueError("square sizes must be positive")
        col = int(x / square_width) - 1
        row = BOARD_SIZE - int(y / square_height)
        return cls(col, row)

    def is_valid(self) -> bool:
        return (self._col_row & _INVALID_MASK) == 0

    @property
    def col(self) -> int:
        """Column 0..7, or -1 when invalid."""
        return (self._col_row & 0xF0) >> 4 if self.is_valid() else -1

    @property
    def row(self) -> int:
        """Row 0..7, or -1 when invalid."""
        return self._col_row & 0x0F if self.is_valid() else -1

    def location(self) -> int:
        """Location 0..63 counting row by row."""
        return self.row * BOARD_SIZE + self.col

    def col_row(self) -> int:
        """The packed byte, or -1 when invalid."""
        return self._col_row if self.is_valid() else -1

    def pixel_x(self, square_width: float = SIZE_SQUARE) -> int:
        return int(self.col * square_width + square_width)

    def pixel_y(self, square_height: float = SIZE_SQUARE) -> int:
        return int(self.row * square_height + square_height)

    def offset(self, delta: Delta) -> Position:
        """Return the square shifted by ``delta``; invalid stays invalid."""
        if not self.is_valid():
            return Position.invalid()
        return Position(self.col + delta.d_col, self.row + delta.d_row)

    def __add__(self, delta: Delta) -> Position:
        if not isinstance(delta, Delta):
            return NotImplemented
        return self.offset(delta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._col_row == other._col_row

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._col_row < other._col_row

    def __hash__(self) -> int:
        return hash(self._col_row)

    def __str__(self) -> str:
        if not self.is_valid():
            return "invalid"
        return chr(ord("a") + self.col) + chr(ord("1") + self.row)

    def __repr__(self) -> str:
        return f"Position({self.col}, {self.row})"