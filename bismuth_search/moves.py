"""Move representation, move lists and move-ordering heuristics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, overload

MAX_LEGAL_MOVE_COUNT = 218

PV_BONUS = 1_000_000
CAPTURE_BONUS = 10_000
PROMOTION_BONUS = 5_000
CASTLE_BONUS = 1_000


class PieceType(Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
    NO_PIECE = "none"


class Castling(Enum):
    NO_CASTLE = "none"
    WHITE_KING_SIDE = "K"
    WHITE_QUEEN_SIDE = "Q"
    BLACK_KING_SIDE = "k"
    BLACK_QUEEN_SIDE = "q"


_PIECE_VALUES = {
    PieceType.PAWN: 208,
    PieceType.KNIGHT: 781,
    PieceType.BISHOP: 825,
    PieceType.ROOK: 1276,
    PieceType.QUEEN: 2538,
    PieceType.KING: 10_000,
    PieceType.NO_PIECE: 0,
}


@dataclass(frozen=True)
class Move:
    """A move; squares are single-bit bitboards."""

    start_square: int
    end_square: int
    piece_type: PieceType
    promotion: PieceType = PieceType.NO_PIECE
    capture: PieceType = PieceType.NO_PIECE
    castle: Castling = Castling.NO_CASTLE
    en_passant: bool = False


def piece_value(piece: PieceType) -> int:
    """Material value of a piece used for move ordering."""
    return _PIECE_VALUES[piece]


def score_move(move: Move) -> int:
    """Heuristic ordering score: MVV/LVA captures, promotions, castling."""
    score = 0
    if move.capture is not PieceType.NO_PIECE:
        score += CAPTURE_BONUS + piece_value(move.capture) - piece_value(move.piece_type)
    if move.promotion is not PieceType.NO_PIECE:
        score += PROMOTION_BONUS + piece_value(move.promotion)
    if move.castle is not Castling.NO_CASTLE:
        score += CASTLE_BONUS
    return score


class MoveList:
    """A bounded list of moves that can be ordered for search."""

    def __init__(self) -> None:
        self._moves: list[Move] = []

    def add(self, move: Move) -> None:
        if len(self._moves) >= MAX_LEGAL_MOVE_COUNT:
            raise OverflowError(f"move list holds at most {MAX_LEGAL_MOVE_COUNT} moves")
        self._moves.append(move)

    def order(self, pv_move: Optional[Move] = None) -> None:
        """Sort moves best first; the principal-variation move gets a large bonus."""

        def key(move: Move) -> int:
            score = score_move(move)
            if pv_move is not None and move == pv_move:
                score += PV_BONUS
            return -score

        self._moves.sort(key=key)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    @overload
    def __getitem__(self, index: int) -> Move: ...

    @overload
    def __getitem__(self, index: slice) -> list[Move]: ...

    def __getitem__(self, index):
        return self._moves[index]