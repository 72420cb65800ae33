"""Pseudo-legal move generation per piece kind + king-safety filtering."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from chessrules.core.board import DEFAULT_PROMOTION, Board, TrialBoard
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    BISHOP_DIRS,
    BOARD_SIZE,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    in_bounds,
    pawn_direction,
    pawn_home_row,
    promotion_row,
)

PieceMoveGen = Callable[[Board, int, int, Piece, list[Move]], None]

_KING_HOME_COL = 4
_KINGSIDE_ROOK_COL = 7
_QUEENSIDE_ROOK_COL = 0

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


# -- Piece-specific generators ---------------------------------------------


def _gen_pawn(board: Board, row: int, col: int, pawn: Piece, moves: list[Move]) -> None:
    step = pawn_direction(pawn.color)
    one_row = row + step

    promoting = one_row == promotion_row(pawn.color)

    if in_bounds(one_row, col) and board.is_empty(one_row, col):
        _add_pawn_move(row, col, one_row, col, promoting, moves)
        two_row = row + 2 * step
        if row == pawn_home_row(pawn.color) and board.is_empty(two_row, col):
            moves.append(Move(row, col, two_row, col))

    for dc in (-1, 1):
        target = board.get(one_row, col + dc)
        if target is not None and target.color != pawn.color:
            _add_pawn_move(row, col, one_row, col + dc, promoting, moves)


def _add_pawn_move(
    row: int, col: int, to_row: int, to_col: int, promoting: bool, moves: list[Move]
) -> None:
    if not promoting:
        moves.append(Move(row, col, to_row, to_col))
        return
    for pt in PROMOTION_TYPES:
        moves.append(Move(row, col, to_row, to_col, pt))


def _gen_steps(
    board: Board,
    row: int,
    col: int,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    for dr, dc in offsets:
        to_row = row + dr
        to_col = col + dc
        if not in_bounds(to_row, to_col):
            continue
        target = board.get(to_row, to_col)
        if target is None or target.color != piece.color:
            moves.append(Move(row, col, to_row, to_col))


def _gen_sliding(
    board: Board,
    row: int,
    col: int,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    for dr, dc in directions:
        to_row = row + dr
        to_col = col + dc
        while in_bounds(to_row, to_col):
            target = board.get(to_row, to_col)
            if target is None:
                moves.append(Move(row, col, to_row, to_col))
            else:
                if target.color != piece.color:
                    moves.append(Move(row, col, to_row, to_col))
                break
            to_row += dr
            to_col += dc


def _gen_knight(
    board: Board, row: int, col: int, knight: Piece, moves: list[Move]
) -> None:
    _gen_steps(board, row, col, knight, KNIGHT_OFFSETS, moves)


def _gen_bishop(
    board: Board, row: int, col: int, bishop: Piece, moves: list[Move]
) -> None:
    _gen_sliding(board, row, col, bishop, BISHOP_DIRS, moves)


def _gen_rook(board: Board, row: int, col: int, rook: Piece, moves: list[Move]) -> None:
    _gen_sliding(board, row, col, rook, ROOK_DIRS, moves)


def _gen_queen(
    board: Board, row: int, col: int, queen: Piece, moves: list[Move]
) -> None:
    _gen_sliding(board, row, col, queen, QUEEN_DIRS, moves)


def _gen_king(board: Board, row: int, col: int, king: Piece, moves: list[Move]) -> None:
    _gen_steps(board, row, col, king, KING_OFFSETS, moves)

    # Also requires the e-file: an unmoved king placed elsewhere never castles.
    if king.has_moved or col != _KING_HOME_COL or board.is_king_in_check(king.color):
        return
    if _can_castle(board, row, col, king.color, _KINGSIDE_ROOK_COL):
        moves.append(Move(row, col, row, col + 2))
    if _can_castle(board, row, col, king.color, _QUEENSIDE_ROOK_COL):
        moves.append(Move(row, col, row, col - 2))


def _can_castle(board: Board, row: int, col: int, color: Color, rook_col: int) -> bool:
    rook = board.get(row, rook_col)
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != color
        or rook.has_moved
    ):
        return False

    step = 1 if rook_col > col else -1
    for between in range(col + step, rook_col, step):
        if not board.is_empty(row, between):
            return False

    # Only the king's own path is tested; the rook may pass attacked squares.
    opponent = color.opposite
    return not (
        board.is_square_attacked(row, col + step, opponent)
        or board.is_square_attacked(row, col + 2 * step, opponent)
    )


_GENERATORS: dict[PieceType, PieceMoveGen] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}


def pseudo_legal_moves(board: Board, row: int, col: int) -> list[Move]:
    """Moves matching the movement pattern of the piece on (row, col).

    King safety is ignored. An empty or off-board square yields no moves.
    """
    piece = board.get(row, col)
    if piece is None:
        return []
    moves: list[Move] = []
    _GENERATORS[piece.piece_type](board, row, col, piece, moves)
    return moves


def normalize_move(board: Board, move: Move) -> Move:
    """Canonical form of *move* as the generator would emit it.

    A pawn move onto the far rank without a promotion choice becomes a
    queen promotion; any other move loses a stray promotion choice.
    """
    piece = board.get(move.from_row, move.from_col)
    promoting = (
        piece is not None
        and piece.piece_type == PieceType.PAWN
        and move.to_row == promotion_row(piece.color)
    )
    if promoting:
        if move.promotion is None:
            return replace(move, promotion=DEFAULT_PROMOTION)
        return move
    if move.promotion is not None:
        return replace(move, promotion=None)
    return move


class MoveGenerator:
    """Generates legal moves on a :class:`Board`.

    Each candidate is tried on a :class:`TrialBoard` copy and kept only if the
    mover's king is not attacked afterwards. The wrapped board is never
    mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, row: int, col: int) -> list[Move]:
        return pseudo_legal_moves(self._board, row, col)

    def legal_moves_for_piece(self, row: int, col: int) -> list[Move]:
        """Legal moves of the piece on (row, col), whoever's turn it is."""
        piece = self._board.get(row, col)
        if piece is None:
            return []
        return [
            move
            for move in pseudo_legal_moves(self._board, row, col)
            if self.is_safe(move, piece.color)
        ]

    def legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, source squares scanned row-major."""
        legal: list[Move] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._board.get(row, col)
                if piece is not None and piece.color == color:
                    legal.extend(self.legal_moves_for_piece(row, col))
        return legal

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        for row, col in self._board.positions_of(color):
            for move in pseudo_legal_moves(self._board, row, col):
                if self.is_safe(move, color):
                    return True
        return False

    def is_legal(self, move: Move, color: Color) -> bool:
        """Is *move* a legal move for *color* on the wrapped board?

        The source must hold a *color* piece, the :func:`normalize_move` form
        of *move* must be one of its generated moves, and the resulting
        position must not leave *color*'s king attacked.
        """
        piece = self._board.get(move.from_row, move.from_col)
        if piece is None or piece.color != color:
            return False
        move = normalize_move(self._board, move)
        if move not in pseudo_legal_moves(self._board, move.from_row, move.from_col):
            return False
        return self.is_safe(move, color)

    def is_safe(self, move: Move, color: Color) -> bool:
        """Would *color*'s king be unattacked after applying *move*?"""
        trial = TrialBoard(self._board)
        trial.apply_move(move)
        return not trial.is_king_in_check(color)
