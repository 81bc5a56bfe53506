"""Iterative-deepening negamax search with alpha-beta pruning and quiescence."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from bismuth_search.moves import Move, MoveList, PieceType
from bismuth_search.transposition import NodeType, TranspositionTable

MATE_VALUE = 10_000_000
INFINITY = 100_000_000
MAX_SEARCH_DEPTH = 254
DEFAULT_TABLE_SIZE_MB = 128


class GameState(Enum):
    ONGOING = "ongoing"
    WHITE_WIN = "white_win"
    BLACK_WIN = "black_win"
    DRAW = "draw"


@dataclass(frozen=True)
class EngineMove:
    move: Move
    eval: int


NULL_MOVE = EngineMove(Move(0, 0, PieceType.NO_PIECE), 0)


class Position(Protocol):
    """What the searcher needs from a board."""

    def zobrist_hash(self) -> int: ...

    def generate_moves(self, captures_only: bool) -> MoveList: ...

    def game_state(self, moves: MoveList) -> GameState: ...

    def make_move(self, move: Move) -> Any: ...

    def undo_move(self, undo: Any) -> None: ...

    def evaluate(self) -> int:
        """Static evaluation from the side to move's point of view."""
        ...


class SearchAborted(Exception):
    """Raised inside the search when a stop has been requested."""


class Searcher:
    """Holds search state between iterations and across searches."""

    def __init__(self, table_size_mb: int = DEFAULT_TABLE_SIZE_MB) -> None:
        self.current_iteration_depth = 0
        self.nodes = 0
        self.seldepth = 0
        self.best_move = NULL_MOVE
        self.best_move_this_iteration = NULL_MOVE
        self.has_searched_one_move = False
        self.transposition_table = TranspositionTable(table_size_mb)
        self._stop = threading.Event()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        """Request that a running search abort as soon as possible."""
        self._stop.set()

    def stop_after(self, seconds: float) -> threading.Timer:
        """Clear any pending stop and schedule one after ``seconds``."""
        self._stop.clear()
        timer = threading.Timer(seconds, self._stop.set)
        timer.daemon = True
        timer.start()
        return timer

    def iterative_deepening(self, position: Position, max_depth: int = MAX_SEARCH_DEPTH) -> EngineMove:
        """Search ever deeper until stopped or ``max_depth`` is done; return the best move."""
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.best_move = NULL_MOVE
        self.best_move_this_iteration = NULL_MOVE

        for depth in range(1, max_depth + 1):
            self.has_searched_one_move = False
            self.best_move_this_iteration = NULL_MOVE
            try:
                self.negamax(position, -INFINITY, INFINITY, depth, 0)
            except SearchAborted:
                break
            if self.stopped:
                break
            self.current_iteration_depth = depth
            if self.has_searched_one_move:
                self.best_move = self.best_move_this_iteration
        return self.best_move

    def _check_stop(self) -> None:
        if self._stop.is_set():
            raise SearchAborted()

    def negamax(
        self,
        position: Position,
        alpha: int,
        beta: int,
        depth_left: int,
        depth_from_root: int = 0,
    ) -> int:
        """Alpha-beta score of the position from the side to move's point of view."""
        self._check_stop()
        table = self.transposition_table
        key = position.zobrist_hash()

        cached = table.lookup(key, depth_left, depth_from_root, alpha, beta)
        if cached is not None:
            if depth_from_root == 0:
                stored = table.stored_move(key)
                if stored is not None:
                    self.best_move_this_iteration = EngineMove(stored, table.entry(key).value)
                    self.has_searched_one_move = True
            return cached

        if depth_left == 0:
            return self._quiescence(position, alpha, beta, depth_from_root)

        moves = position.generate_moves(False)
        state = position.game_state(moves)
        if state in (GameState.WHITE_WIN, GameState.BLACK_WIN):
            return -MATE_VALUE + depth_from_root
        if state is GameState.DRAW:
            return 0

        pv_move: Optional[Move] = (
            self.best_move.move if depth_from_root == 0 else table.stored_move(key)
        )
        moves.order(pv_move)

        bound = NodeType.UPPER_BOUND
        best_here: Optional[Move] = None
        for move in moves:
            undo = position.make_move(move)
            try:
                score = -self.negamax(position, -beta, -alpha, depth_left - 1, depth_from_root + 1)
            finally:
                position.undo_move(undo)

            if score >= beta:
                table.store(key, depth_left, depth_from_root, beta, NodeType.LOWER_BOUND, move)
                return beta
            if score > alpha:
                bound = NodeType.EXACT
                best_here = move
                alpha = score
                if depth_from_root == 0:
                    self.best_move_this_iteration = EngineMove(move, score)
                    self.has_searched_one_move = True

        table.store(key, depth_left, depth_from_root, alpha, bound, best_here)
        return alpha

    def _quiescence(self, position: Position, alpha: int, beta: int, ply: int) -> int:
        self._check_stop()
        moves = position.generate_moves(True)
        stand_pat = position.evaluate()
        self.nodes += 1
        self.seldepth = max(self.seldepth, ply)

        if stand_pat >= beta:
            return beta
        alpha = max(alpha, stand_pat)

        moves.order(None)
        for move in moves:
            undo = position.make_move(move)
            try:
                score = -self._quiescence(position, -beta, -alpha, ply + 1)
            finally:
                position.undo_move(undo)
            if score >= beta:
                return beta
            alpha = max(alpha, score)
        return alpha