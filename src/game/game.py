"""
Othello game module.
Owns the authoritative board and turn, and drives full games.
"""
import logging
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any
import numpy as np

from .board import Board, Cell, Move, opponent
from .moves import legal_moves, apply_move, has_legal_move
from .position import load_position

logger = logging.getLogger(__name__)


class GameResult(Enum):
    BLACK_WINS = "black"
    WHITE_WINS = "white"
    DRAW = "draw"


class ReversiGame:
    """
    Main game class that manages the game state and flow.

    The board held here is the only authoritative one; searches receive copies.
    """

    def __init__(self, board: Optional[Board] = None, turn: Cell = Cell.BLACK):
        """
        Initialize a new game.

        Args:
            board: Starting position (copied). If None, uses the standard opening.
            turn: Player to move first
        """
        self.start_board = board.copy() if board is not None else Board.initial()
        self.start_turn = Cell(turn)
        self.reset()

    @classmethod
    def from_file(cls, filepath: str) -> 'ReversiGame':
        """Create a game from a position file."""
        board, turn = load_position(filepath)
        return cls(board, turn)

    def reset(self) -> None:
        """Reset the game to its starting position."""
        self.board = self.start_board.copy()
        self.current_player = self.start_turn
        self.move_history: List[Dict[str, Any]] = []

    def get_valid_moves(self, player: Optional[Cell] = None) -> List[Move]:
        """
        Get all legal moves for a player.

        Args:
            player: Player to check. If None, uses the current player.

        Returns:
            List of (row, col) tuples; empty means the player must pass
        """
        if player is None:
            player = self.current_player
        return legal_moves(self.board, player)

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        if (row, col) not in self.get_valid_moves():
            return False

        player = self.current_player
        flipped = apply_move(self.board, (row, col), player)
        self.move_history.append({
            'player': player,
            'move': (row, col),
            'flipped': flipped,
        })
        logger.debug("%s plays (%d, %d), flipping %d", player.name, row, col, len(flipped))

        self.current_player = opponent(player)
        return True

    def pass_turn(self) -> bool:
        """
        Skip the current player's turn. Only allowed when they have no legal move.

        Returns:
            bool: True if the turn was passed
        """
        if self.get_valid_moves():
            return False
        logger.debug("%s passes", self.current_player.name)
        self.move_history.append({'player': self.current_player, 'move': None, 'flipped': []})
        self.current_player = opponent(self.current_player)
        return True

    def is_game_over(self) -> bool:
        """The game ends on a full board or when neither player can move."""
        if self.board.is_full():
            return True
        return not (has_legal_move(self.board, Cell.BLACK) or has_legal_move(self.board, Cell.WHITE))

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.get_score()

    def get_winner(self) -> Optional[Cell]:
        """
        Get the player with strictly more pieces.

        Returns:
            Cell.BLACK or Cell.WHITE, or None on equal counts
        """
        black, white = self.get_score()
        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return None

    def get_result(self) -> Optional[GameResult]:
        """Return the final result, or None while the game is still running."""
        if not self.is_game_over():
            return None
        winner = self.get_winner()
        if winner == Cell.BLACK:
            return GameResult.BLACK_WINS
        if winner == Cell.WHITE:
            return GameResult.WHITE_WINS
        return GameResult.DRAW

    def get_placements(self) -> List[Move]:
        """Moves played so far, passes left out."""
        return [entry['move'] for entry in self.move_history if entry['move'] is not None]

    def play_engine_move(self, engine, depth: Optional[int] = None) -> Optional[Move]:
        """
        Let a search engine play for the current player.

        Args:
            engine: Object with best_move(board, player, depth)
            depth: Search depth passed through to the engine

        Returns:
            The move played, or None if the current player had to pass
        """
        if not self.get_valid_moves():
            self.pass_turn()
            return None

        move = engine.best_move(self.board.copy(), self.current_player, depth)
        self.make_move(*move)
        return move

    def play_full_game(self, engine, depth: Optional[int] = None) -> List[Move]:
        """
        Play the game out with the same engine on both sides.

        Returns:
            List of moves played, in order
        """
        moves = []
        while not self.is_game_over():
            move = self.play_engine_move(engine, depth)
            if move is not None:
                moves.append(move)

        black, white = self.get_score()
        logger.info("Game finished after %d moves: Black %d - White %d (%s)",
                    len(moves), black, white, self.get_result().value)
        return moves

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of Cell values
        """
        return self.board.get_board_state()

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame(self.start_board, self.start_turn)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.move_history = list(self.move_history)
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.board)
        result += f"\nCurrent player: {'Black' if self.current_player == Cell.BLACK else 'White'}"

        if self.is_game_over():
            winner = self.get_winner()
            if winner is None:
                result += "\nGame over! It's a draw!"
            else:
                result += f"\nGame over! {'Black' if winner == Cell.BLACK else 'White'} wins!"

        return result
