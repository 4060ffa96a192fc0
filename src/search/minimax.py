"""
Minimax search with alpha-beta pruning.

The search never touches the board it is given: every simulated move is
played on a fresh copy that is dropped once its subtree returns. Scores are
always material difference from the root player's point of view, while the
maximizing flag alternates ply by ply.
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..game.board import Board, Cell, Move, opponent
from ..game.moves import legal_moves, apply_move
from .evaluate import evaluate

logger = logging.getLogger(__name__)

INF = float('inf')


@dataclass
class SearchResult:
    """Best root move with its score and the statistics of the search that found it."""
    move: Move
    score: int
    depth: int
    nodes: int = 0
    cutoffs: int = 0

    @property
    def index(self) -> int:
        """Linear cell index of the move (row * 8 + col)."""
        return self.move[0] * Board.SIZE + self.move[1]


class SearchEngine:
    """Depth-limited minimax search."""

    def __init__(self, depth: int = 4):
        """
        Initialize the search engine.

        Args:
            depth: Default search depth in plies, used when search() gets none
        """
        self.depth = depth
        self.nodes = 0
        self.cutoffs = 0

    def _reset_stats(self):
        self.nodes = 0
        self.cutoffs = 0

    def minimax(self, board: Board, depth: int, maximizing: bool, current_player: Cell,
                alpha: float, beta: float, root_player: Cell) -> int:
        """
        Score a position by alpha-beta minimax.

        A position where `current_player` has no legal move is a leaf; the
        search does not pass the turn.

        Args:
            board: Position to score (not modified)
            depth: Plies left before the horizon
            maximizing: True where the root player's score is maximized
            current_player: Player to move in this position
            alpha: Best score the maximizer is already guaranteed
            beta: Best score the minimizer is already guaranteed
            root_player: Player whose material difference is scored

        Returns:
            Material difference from the root player's perspective
        """
        self.nodes += 1

        if depth == 0:
            return evaluate(board, root_player)

        moves = legal_moves(board, current_player)
        if not moves:
            return evaluate(board, root_player)

        next_player = opponent(current_player)

        if maximizing:
            max_eval = -INF
            for move in moves:
                new_board = board.copy()
                apply_move(new_board, move, current_player)
                score = self.minimax(new_board, depth - 1, False, next_player, alpha, beta, root_player)
                max_eval = max(max_eval, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    self.cutoffs += 1
                    break
            return max_eval

        min_eval = INF
        for move in moves:
            new_board = board.copy()
            apply_move(new_board, move, current_player)
            score = self.minimax(new_board, depth - 1, True, next_player, alpha, beta, root_player)
            min_eval = min(min_eval, score)
            beta = min(beta, score)
            if beta <= alpha:
                self.cutoffs += 1
                break
        return min_eval

    def search(self, board: Board, player: Cell, depth: Optional[int] = None) -> Optional[SearchResult]:
        """
        Pick the best move for `player`.

        Each root move is scored by a full-window search one ply down with the
        opponent to move. The highest score wins; equal scores go to the move
        with the smaller linear index.

        Args:
            board: Current position (not modified)
            player: Player to move
            depth: Search depth in plies (default: self.depth)

        Returns:
            SearchResult, or None if `player` has no legal move
        """
        depth = self.depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        player = Cell(player)
        self._reset_stats()
        start_time = time.time()

        moves = legal_moves(board, player)
        if not moves:
            logger.debug("No legal moves for %s", player.name)
            return None

        best_score = -INF
        best = moves[0]
        size = Board.SIZE
        for move in moves:
            new_board = board.copy()
            apply_move(new_board, move, player)
            score = self.minimax(new_board, depth - 1, False, opponent(player), -INF, INF, player)

            if (score > best_score or
                    (score == best_score and move[0] * size + move[1] < best[0] * size + best[1])):
                best_score = score
                best = move

        elapsed = time.time() - start_time
        logger.debug(
            "depth %d: %s plays %s (score %d) after %d nodes, %d cutoffs in %.3fs",
            depth, player.name, best, best_score, self.nodes, self.cutoffs, elapsed,
        )
        return SearchResult(move=best, score=int(best_score), depth=depth,
                            nodes=self.nodes, cutoffs=self.cutoffs)

    def best_move(self, board: Board, player: Cell, depth: Optional[int] = None) -> Optional[Move]:
        """Return only the chosen move, or None when `player` must pass."""
        result = self.search(board, player, depth)
        return result.move if result is not None else None


def minimax(board: Board, depth: int, maximizing: bool, current_player: Cell, root_player: Cell,
            alpha: float = -INF, beta: float = INF) -> int:
    """Run a single alpha-beta minimax call with `root_player` as the scoring perspective."""
    return SearchEngine(depth).minimax(board, depth, maximizing, Cell(current_player), alpha, beta,
                                       Cell(root_player))


def best_move(board: Board, player: Cell, depth: int) -> Optional[Move]:
    """Pick a move for `player` with a fresh engine; None means `player` must pass."""
    return SearchEngine(depth).best_move(board, player, depth)
