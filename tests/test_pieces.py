import pytest

from knightboard.move import Move, MoveType, PieceType
from knightboard.piece import Space
from knightboard.pieces import Bishop, King, Knight, Pawn, Queen, Rook
from knightboard.position import Position


class FakeBoard:
    def __init__(self, current=0):
        self.squares = {}
        self.current = current

    def place(self, piece):
        self.squares[piece.position] = piece
        return piece

    def __getitem__(self, position):
        return self.squares.get(position, Space(position))

    def current_move(self):
        return self.current


def sq(text):
    return Position.from_text(text)


def texts(moves):
    return [move.text() for move in moves]


def assert_belongs_to(moves, piece):
    for move in moves:
        assert move.source == piece.position
        assert move.white == piece.white


@pytest.mark.parametrize(
    "cls, expected",
    [
        (King, PieceType.KING),
        (Queen, PieceType.QUEEN),
        (Rook, PieceType.ROOK),
        (Bishop, PieceType.BISHOP),
        (Knight, PieceType.KNIGHT),
        (Pawn, PieceType.PAWN),
    ],
)
def test_piece_type(cls, expected):
    assert cls(Position(7, 7), False).piece_type() is expected


# Knight


def test_knight_end():
    board = FakeBoard()
    knight = board.place(Knight(Position(6, 0), True))
    board.place(Pawn(Position(4, 1), False))
    board.place(Pawn(Position(5, 2), True))
    moves = knight.get_moves(board)
    assert len(moves) == 2
    assert Move.parse("g1e2p") in moves
    assert Move.parse("g1h3") in moves


def test_knight_blocked():
    board = FakeBoard()
    knight = board.place(Knight(Position(3, 4), True))
    for col, row in [(2, 6), (4, 6), (1, 5), (5, 5), (1, 3), (5, 3), (2, 2), (4, 2)]:
        board.place(Pawn(Position(col, row), True))
    assert knight.get_moves(board) == []


def test_knight_capture_all():
    board = FakeBoard()
    knight = board.place(Knight(Position(3, 4), True))
    targets = [(2, 6), (4, 6), (1, 5), (5, 5), (1, 3), (5, 3), (2, 2), (4, 2)]
    for col, row in targets:
        board.place(Pawn(Position(col, row), False))
    moves = knight.get_moves(board)
    assert {move.dest for move in moves} == {Position(c, r) for c, r in targets}
    assert all(move.capture is PieceType.PAWN for move in moves)


def test_knight_free():
    board = FakeBoard()
    knight = board.place(Knight(Position(3, 3), True))
    moves = knight.get_moves(board)
    expected = {Position(c, r) for c, r in [(2, 5), (4, 5), (2, 1), (4, 1), (1, 4), (5, 4), (1, 2), (5, 2)]}
    assert {move.dest for move in moves} == expected
    assert_belongs_to(moves, knight)


# Bishop


def _bishop_board():
    board = FakeBoard()
    bishop = board.place(Bishop(Position(2, 1), True))
    return board, bishop


def test_bishop_blocked():
    board, bishop = _bishop_board()
    for col, row in [(1, 0), (1, 2), (3, 0), (3, 2)]:
        board.place(Pawn(Position(col, row), True))
    assert bishop.get_moves(board) == []


def test_bishop_slide_to_end():
    board, bishop = _bishop_board()
    moves = bishop.get_moves(board)
    expected = {Position(c, r) for c, r in [(0, 3), (1, 2), (3, 2), (4, 3), (5, 4), (6, 5), (7, 6), (1, 0), (3, 0)]}
    assert len(moves) == 9
    assert {move.dest for move in moves} == expected


def test_bishop_slide_to_block():
    board, bishop = _bishop_board()
    for col, row in [(1, 0), (3, 0), (0, 3), (7, 6)]:
        board.place(Pawn(Position(col, row), True))
    moves = bishop.get_moves(board)
    expected = {Position(c, r) for c, r in [(1, 2), (3, 2), (4, 3), (5, 4), (6, 5)]}
    assert len(moves) == 5
    assert {move.dest for move in moves} == expected


def test_bishop_slide_to_capture():
    board, bishop = _bishop_board()
    enemies = [(1, 0), (3, 0), (0, 3), (7, 6)]
    for col, row in enemies:
        board.place(Pawn(Position(col, row), False))
    moves = bishop.get_moves(board)
    assert len(moves) == 9
    captures = {move.dest for move in moves if move.capture is PieceType.PAWN}
    assert captures == {Position(c, r) for c, r in enemies}


# Rook and queen


def test_rook_moves_only_orthogonally():
    board = FakeBoard()
    rook = board.place(Rook(sq("d4"), True))
    moves = rook.get_moves(board)
    assert len(moves) == 14
    assert all(move.dest.row == 3 or move.dest.col == 3 for move in moves)
    assert_belongs_to(moves, rook)


def test_rook_stops_at_friend_and_captures_enemy():
    board = FakeBoard()
    rook = board.place(Rook(Position(0, 0), True))
    board.place(Pawn(Position(0, 1), True))
    board.place(Pawn(Position(2, 0), False))
    moves = rook.get_moves(board)
    assert [move.dest for move in moves] == [Position(1, 0), Position(2, 0)]
    assert moves[1].capture is PieceType.PAWN


def test_queen_covers_rook_and_bishop():
    board = FakeBoard()
    queen = board.place(Queen(sq("d4"), True))
    rook_dests = {m.dest for m in Rook(sq("d4"), True).get_moves(board)}
    bishop_dests = {m.dest for m in Bishop(sq("d4"), True).get_moves(board)}
    assert {m.dest for m in queen.get_moves(board)} == rook_dests | bishop_dests


# King


def _king_board(enemy):
    board = FakeBoard()
    king = board.place(King(Position(3, 4), True))
    for col, row in [(2, 5), (3, 5), (4, 5), (4, 4), (4, 3), (3, 3), (2, 3), (2, 4)]:
        board.place(Pawn(Position(col, row), not enemy))
    return board, king


def test_king_blocked():
    board, king = _king_board(enemy=False)
    assert king.get_moves(board) == []


def test_king_capture():
    board, king = _king_board(enemy=True)
    moves = king.get_moves(board)
    assert len(moves) == 8
    assert all(move.capture is PieceType.PAWN for move in moves)


def test_king_free():
    board = FakeBoard()
    king = board.place(King(Position(3, 4), True))
    assert len(king.get_moves(board)) == 8


def test_king_end():
    board = FakeBoard()
    king = board.place(King(Position(0, 0), True))
    moves = king.get_moves(board)
    assert {move.dest for move in moves} == {Position(0, 1), Position(1, 1), Position(1, 0)}


def _castle_board(white):
    board = FakeBoard()
    row = 0 if white else 7
    pawn_row = 1 if white else 6
    king = board.place(King(Position(4, row), white))
    rooks = (board.place(Rook(Position(0, row), white)), board.place(Rook(Position(7, row), white)))
    for col in (3, 4, 5):
        board.place(Pawn(Position(col, pawn_row), white))
    return board, king, rooks


def test_white_castle():
    board, king, _ = _castle_board(True)
    moves = king.get_moves(board)
    assert texts(moves) == ["e1c1C", "e1d1", "e1f1", "e1g1c"]


def test_black_castle():
    board, king, _ = _castle_board(False)
    moves = king.get_moves(board)
    kinds = {move.dest: move.move_type for move in moves}
    assert kinds[Position(6, 7)] is MoveType.CASTLE_KING
    assert kinds[Position(2, 7)] is MoveType.CASTLE_QUEEN
    assert len(moves) == 4


def test_castle_king_moved():
    board, king, _ = _castle_board(True)
    king.n_moves = 1
    moves = king.get_moves(board)
    assert all(move.move_type is MoveType.MOVE for move in moves)
    assert len(moves) == 2


def test_castle_rook_moved():
    board, king, (_, king_rook) = _castle_board(True)
    king_rook.n_moves = 1
    kinds = [move.move_type for move in king.get_moves(board)]
    assert MoveType.CASTLE_KING not in kinds
    assert MoveType.CASTLE_QUEEN in kinds


def test_castle_blocked_by_piece_between():
    board, king, _ = _castle_board(True)
    board.place(Knight(Position(1, 0), True))
    kinds = [move.move_type for move in king.get_moves(board)]
    assert MoveType.CASTLE_QUEEN not in kinds
    assert MoveType.CASTLE_KING in kinds


# Pawn


def test_white_pawn_first_move():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("e2"), True))
    assert texts(pawn.get_moves(board)) == ["e2e3", "e2e4"]


def test_black_pawn_first_move():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("d7"), False))
    moves = pawn.get_moves(board)
    assert {move.dest for move in moves} == {sq("d6"), sq("d5")}
    assert_belongs_to(moves, pawn)


def test_pawn_blocked():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("e2"), True))
    board.place(Knight(sq("e3"), False))
    assert pawn.get_moves(board) == []


def test_moved_pawn_steps_once():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("e3"), True))
    pawn.n_moves = 1
    assert [move.dest for move in pawn.get_moves(board)] == [sq("e4")]


def test_pawn_captures():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("e4"), True))
    pawn.n_moves = 1
    board.place(Rook(sq("d5"), False))
    board.place(Knight(sq("f5"), False))
    board.place(Bishop(sq("d3"), False))
    assert texts(pawn.get_moves(board)) == ["e4d5r", "e4e5", "e4f5n"]


def test_pawn_promotion():
    board = FakeBoard()
    pawn = board.place(Pawn(sq("a7"), True))
    pawn.n_moves = 5
    moves = pawn.get_moves(board)
    assert [move.dest for move in moves] == [sq("a8")]
    assert moves[0].promote is PieceType.QUEEN


def test_pawn_en_passant():
    board = FakeBoard(current=6)
    pawn = board.place(Pawn(sq("e5"), True))
    pawn.n_moves = 2
    victim = board.place(Pawn(sq("d5"), False))
    victim.n_moves = 1
    victim.last_move = 5
    moves = pawn.get_moves(board)
    assert texts(moves) == ["e5d6E", "e5e6"]
    assert moves[0].capture is PieceType.PAWN


def test_pawn_en_passant_too_late():
    board = FakeBoard(current=10)
    pawn = board.place(Pawn(sq("e5"), True))
    pawn.n_moves = 2
    victim = board.place(Pawn(sq("d5"), False))
    victim.n_moves = 1
    victim.last_move = 5
    moves = pawn.get_moves(board)
    assert all(move.move_type is MoveType.MOVE for move in moves)
    assert [move.dest for move in moves] == [sq("e6")]