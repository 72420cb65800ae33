"""Enumerations shared by the board, the move generator and the game state."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Owner of a piece and side to move. White moves first.

    The value doubles as an index into the per-colour tables in
    :mod:`chessrules.core.types`.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Kind of piece; the numbers are identifiers, nothing compares them."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Where the game stands for the side to move.

    Checkmate makes the other side the winner; stalemate is a ``DRAW``.
    Never stored, always recomputed from the board.
    """

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
