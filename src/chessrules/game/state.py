"""Game state machine — turn owner, move history and the public move API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    PROMOTION_TYPES,
    MoveGenerator,
    normalize_move,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """One game session: the board, whose turn it is and what was played.

    The only mutation path is :meth:`attempt_move`; every other method is a
    pure query. Checkmate and stalemate are derived on demand, never stored.
    To restart, build a new ``GameState``.
    """

    board: Board = field(default_factory=Board.initial)
    to_move: Color = Color.WHITE
    _history: list[Move] = field(default_factory=list, init=False, repr=False)

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(self, move: Move) -> bool:
        """Play *move* for the side to move if it is legal.

        Returns ``False`` and leaves the game untouched when there is no piece
        on the source square, the piece belongs to the other side, the
        promotion choice is not a queen, rook, bishop or knight, or the move
        breaks the rules (including leaving the own king in check).

        The move is played and recorded in its :func:`normalize_move` form,
        so the history only holds moves the generator itself produces.
        """
        piece = self.board.get(move.from_row, move.from_col)
        if piece is None:
            _LOGGER.debug("Rejected %s: no piece on source square", move)
            return False
        if piece.color != self.to_move:
            _LOGGER.debug("Rejected %s: %s to move", move, self.to_move)
            return False
        move = normalize_move(self.board, move)
        if move.promotion is not None and move.promotion not in PROMOTION_TYPES:
            _LOGGER.debug(
                "Rejected %s: cannot promote to %s", move, move.promotion.name
            )
            return False
        if not MoveGenerator(self.board).is_legal(move, self.to_move):
            _LOGGER.debug("Rejected %s: not a legal move", move)
            return False

        self.board.apply_move(move)
        self._history.append(move)
        self.to_move = self.to_move.opposite
        _LOGGER.debug("Played %s, %s to move", move, self.to_move)
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Occupant of (row, col); off-board squares hold nothing."""
        return self.board.get(row, col)

    def legal_moves_for_square(self, row: int, col: int) -> list[Move]:
        """Legal moves of the piece on (row, col), regardless of turn."""
        return MoveGenerator(self.board).legal_moves_for_piece(row, col)

    def legal_destinations(self, row: int, col: int) -> list[Square]:
        """Target squares a front end would highlight for (row, col).

        Each square appears once, even when several promotion choices
        lead there.
        """
        squares = [move.to_sq for move in self.legal_moves_for_square(row, col)]
        return list(dict.fromkeys(squares))

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).legal_moves(self.to_move)

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self.board, self._color_or_turn(color))

    def is_checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self.board, self._color_or_turn(color))

    def is_stalemate(self, color: Color | None = None) -> bool:
        return Rules.is_stalemate(self.board, self._color_or_turn(color))

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self.board, self.to_move)

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def history(self) -> tuple[Move, ...]:
        """Accepted moves, oldest first."""
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _color_or_turn(self, color: Color | None) -> Color:
        return self.to_move if color is None else color
