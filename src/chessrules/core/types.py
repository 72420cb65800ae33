"""Square type alias and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black's back rank), row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h

So ``(7, 4)`` is e1 and ``(0, 4)`` is e8.
"""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.enums import Color

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1', (0, 0) → 'a8'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


# ── Pawn geometry ───────────────────────────────────────────────────────────
# One table per concern, indexed by Color. Move generation, attack detection
# and promotion all read from here so the directions cannot drift apart.

_PAWN_DIRECTION: tuple[int, int] = (-1, 1)
_PAWN_HOME_ROW: tuple[int, int] = (6, 1)
_PROMOTION_ROW: tuple[int, int] = (0, 7)


def pawn_direction(color: Color) -> int:
    """Row delta of a single pawn step: white moves up (-1), black down (+1)."""
    return _PAWN_DIRECTION[int(color)]


def pawn_home_row(color: Color) -> int:
    """Row from which a pawn of *color* may advance two squares."""
    return _PAWN_HOME_ROW[int(color)]


def promotion_row(color: Color) -> int:
    """Far rank on which a pawn of *color* promotes."""
    return _PROMOTION_ROW[int(color)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))


# ── Movement tables: (row delta, col delta) ─────────────────────────────────

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS
