"""Board - piece placement on an 8x8 grid, raw move application and attacks."""

from __future__ import annotations

import logging

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    BOARD_SIZE,
    KNIGHT_OFFSETS,
    Square,
    in_bounds,
    pawn_direction,
    promotion_row,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_PROMOTION = PieceType.QUEEN

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# King destination column -> (rook from column, rook to column)
_CASTLE_ROOK_COLS: dict[int, tuple[int, int]] = {
    6: (7, 5),
    2: (0, 3),
}

_KNIGHT_DELTAS = frozenset(KNIGHT_OFFSETS)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Row 0 is black's back rank, row 7 is white's. The board never checks
    legality: :meth:`apply_move` does exactly what it is told and legality
    lives in :class:`~chessrules.core.move_generator.MoveGenerator`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        """Occupant of (row, col); ``None`` for empty or off-board cells."""
        if not in_bounds(row, col):
            return None
        return self._grid[row][col]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(*sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not in_bounds(row, col):
            raise ValueError(f"Square off the board: {sq!r}")
        self._grid[row][col] = piece

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    # -- Query helpers ------------------------------------------------------

    def positions_of(self, color: Color) -> list[Square]:
        """Squares holding *color*'s pieces, in row-major order."""
        squares: list[Square] = []
        for r, row in enumerate(self._grid):
            for c, piece in enumerate(row):
                if piece is not None and piece.color == color:
                    squares.append((r, c))
        return squares

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        squares: list[Square] = []
        for r, row in enumerate(self._grid):
            for c, piece in enumerate(row):
                if (
                    piece is not None
                    and piece.color == color
                    and piece.piece_type == piece_type
                ):
                    squares.append((r, c))
        return squares

    def find_king(self, color: Color) -> Square | None:
        """First king of *color* in row-major order, or ``None``."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, move: Move) -> None:
        """Apply *move* unconditionally.

        Handles the rook hop of a castling king (a king moving two columns)
        and replaces a pawn that lands on its far rank with the requested
        promotion piece (queen by default). An empty source square is a no-op.
        """
        piece = self.get(move.from_row, move.from_col)
        if piece is None:
            _LOGGER.debug("apply_move %s: no piece on source square", move)
            return

        if (
            piece.piece_type == PieceType.KING
            and abs(move.to_col - move.from_col) == 2
        ):
            self._castle_rook(move.from_row, move.to_col)

        self[move.to_sq] = piece
        self[move.from_sq] = None
        piece.has_moved = True

        if piece.piece_type == PieceType.PAWN and move.to_row == promotion_row(
            piece.color
        ):
            kind = move.promotion if move.promotion is not None else DEFAULT_PROMOTION
            self[move.to_sq] = Piece(kind, piece.color, has_moved=True)

    def _castle_rook(self, row: int, king_to_col: int) -> None:
        cols = _CASTLE_ROOK_COLS.get(king_to_col)
        if cols is None:
            return
        rook_from, rook_to = cols
        rook = self._grid[row][rook_from]
        if rook is None:
            return
        self._grid[row][rook_to] = rook
        self._grid[row][rook_from] = None
        rook.has_moved = True

    def copy(self) -> Board:
        """Deep copy: every piece is duplicated along with its moved-flag."""
        b = Board()
        b._grid = self._copied_grid()
        return b

    def _copied_grid(self) -> list[list[Piece | None]]:
        return [
            [p.copy() if p is not None else None for p in row] for row in self._grid
        ]

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, row: int, col: int, by_color: Color) -> bool:
        """Is (row, col) attacked by any piece of *by_color*?

        Purely geometric: pieces attack along their patterns up to the first
        occupied cell. Pins and king safety play no part.
        """
        if not in_bounds(row, col):
            return False
        for pr, pc in self.positions_of(by_color):
            piece = self._grid[pr][pc]
            assert piece is not None
            if self._attacks(piece, pr, pc, row, col):
                return True
        return False

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? A board without that king is not in check."""
        king_sq = self.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(*king_sq, color.opposite)

    def _attacks(self, piece: Piece, pr: int, pc: int, tr: int, tc: int) -> bool:
        dr = tr - pr
        dc = tc - pc
        if dr == 0 and dc == 0:
            return False

        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return dr == pawn_direction(piece.color) and abs(dc) == 1
        if ptype == PieceType.KNIGHT:
            return (dr, dc) in _KNIGHT_DELTAS
        if ptype == PieceType.KING:
            return max(abs(dr), abs(dc)) == 1

        diagonal = abs(dr) == abs(dc)
        straight = dr == 0 or dc == 0
        if ptype == PieceType.BISHOP and not diagonal:
            return False
        if ptype == PieceType.ROOK and not straight:
            return False
        if ptype == PieceType.QUEEN and not (diagonal or straight):
            return False
        return self._ray_clear(pr, pc, tr, tc)

    def _ray_clear(self, pr: int, pc: int, tr: int, tc: int) -> bool:
        step_r = _sign(tr - pr)
        step_c = _sign(tc - pc)
        r, c = pr + step_r, pc + step_c
        while (r, c) != (tr, tc):
            if self._grid[r][c] is not None:
                return False
            r += step_r
            c += step_c
        return True

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for c in range(BOARD_SIZE):
            b[(1, c)] = Piece(PieceType.PAWN, Color.BLACK)
            b[(6, c)] = Piece(PieceType.PAWN, Color.WHITE)

        for c, pt in enumerate(BACK_RANK):
            b[(0, c)] = Piece(pt, Color.BLACK)
            b[(7, c)] = Piece(pt, Color.WHITE)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(BOARD_SIZE):
            row = [str(p) if p else "." for p in self._grid[r]]
            rows.append(f"{square_name((r, 0))[1]} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


class TrialBoard(Board):
    """Scratch board for probing a hypothetical move.

    Can only be built from another board, as a deep copy, so applying moves
    to it never touches the original.
    """

    __slots__ = ()

    def __init__(self, source: Board) -> None:
        super().__init__()
        self._grid = source._copied_grid()
