"""Game management layer — turn sequencing and move history.

Quick start::

    from chessrules.core import Move
    from chessrules.game import GameState

    game = GameState()
    game.attempt_move(Move(6, 4, 4, 4))  # e2-e4
"""

from chessrules.game.state import GameState

__all__ = [
    "GameState",
]
