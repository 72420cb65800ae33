"""High-level chess rules: check, checkmate, stalemate, game result."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a color."""

    # Scope: no en passant, no fifty-move or repetition draws.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return board.is_king_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def game_result(board: Board, to_move: Color) -> GameResult:
        """Determine the current game result with *to_move* on turn."""
        if MoveGenerator(board).has_legal_move(to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, to_move):
            return (
                GameResult.BLACK_WINS
                if to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
