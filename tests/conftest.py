"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

BoardBuilder = Callable[..., Board]

_START = Board.initial()


def board_from_diagram(rows: list[str], moved: Iterable[Square] = ()) -> Board:
    """Build a board from eight rows of FEN characters ('.' = empty).

    The first row is row 0 (black's back rank). A piece counts as unmoved
    only when it stands on its square of the standard starting position;
    squares listed in *moved* are marked as moved regardless.
    """
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"Diagram must be 8x8: {rows!r}")

    forced = set(moved)
    board = Board()
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char == ".":
                continue
            piece = Piece.from_char(char)
            home = _START[(r, c)]
            piece.has_moved = (r, c) in forced or not (
                home is not None
                and home.color == piece.color
                and home.piece_type == piece.piece_type
            )
            board[(r, c)] = piece
    return board


@pytest.fixture
def make_board() -> BoardBuilder:
    """Factory fixture: ``make_board(rows, moved=())`` → :class:`Board`."""
    return board_from_diagram
