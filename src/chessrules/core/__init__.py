"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.legal_moves(Color.WHITE):
        print(move)
"""

from chessrules.core.board import DEFAULT_PROMOTION, Board, TrialBoard
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    PROMOTION_TYPES,
    MoveGenerator,
    normalize_move,
    pseudo_legal_moves,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    in_bounds,
    parse_square,
    pawn_direction,
    pawn_home_row,
    promotion_row,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "pawn_direction",
    "pawn_home_row",
    "promotion_row",
    "square_name",
    # Domain objects
    "DEFAULT_PROMOTION",
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "PROMOTION_TYPES",
    "TrialBoard",
    "normalize_move",
    "pseudo_legal_moves",
]
