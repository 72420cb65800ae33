"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, in_bounds, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``promotion`` only matters when a pawn reaches the far rank; ``None``
    there means a queen. Castling is a king move of two columns.
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    promotion: PieceType | None = None

    @classmethod
    def between(
        cls, from_sq: Square, to_sq: Square, promotion: PieceType | None = None
    ) -> Move:
        """Build a move from two ``(row, col)`` squares."""
        return cls(from_sq[0], from_sq[1], to_sq[0], to_sq[1], promotion)

    @property
    def from_sq(self) -> Square:
        return (self.from_row, self.from_col)

    @property
    def to_sq(self) -> Square:
        return (self.to_row, self.to_col)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if not (in_bounds(*self.from_sq) and in_bounds(*self.to_sq)):
            return f"{self.from_sq}->{self.to_sq}"
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base
