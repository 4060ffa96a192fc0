"""
Interactive human-vs-computer session.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .board import Cell, Move, opponent
from .game import ReversiGame, GameResult
from .position import format_board

logger = logging.getLogger(__name__)

DIFFICULTY_LABELS = [
    "Extremely easy",
    "Easy",
    "Medium",
    "Hard",
    "Extremely hard",
]


@dataclass
class SessionOutcome:
    """How an interactive game ended."""
    result: Optional[GameResult]
    human_score: int
    computer_score: int
    forfeited: bool = False


def parse_move(text: str) -> Optional[Move]:
    """Parse 'row col' into a move tuple. Returns None if the text is not two integers."""
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


class InteractiveSession:
    """
    Plays one game between a human at the terminal and the search engine.

    An illegal or unreadable human move ends the game as a forfeit.
    """

    def __init__(self, game: ReversiGame, engine, depth: int, human: Cell = Cell.BLACK,
                 input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
        """
        Initialize the session.

        Args:
            game: Game holding the starting position
            engine: Search engine with best_move(board, player, depth)
            depth: Search depth for the computer
            human: Colour played by the human
            input_fn: Prompt function (default: input)
            output_fn: Output function (default: print)
        """
        self.game = game
        self.engine = engine
        self.depth = depth
        self.human = Cell(human)
        self.computer = opponent(self.human)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _show_board(self, title: str):
        self.output_fn(title)
        self.output_fn(format_board(self.game.board))

    def _human_turn(self) -> bool:
        """Returns False if the human forfeited."""
        moves = self.game.get_valid_moves()
        if not moves:
            self.output_fn("No valid moves available for you!")
            self.game.pass_turn()
            return True

        move = parse_move(self.input_fn("Enter your move (row column): "))
        if move is None or move not in moves:
            self.output_fn("Invalid move! Game over.")
            logger.info("Human forfeited with illegal move %s", move)
            return False

        self.game.make_move(*move)
        self._show_board("Board after your move:")
        return True

    def _computer_turn(self):
        move = self.game.play_engine_move(self.engine, self.depth)
        if move is None:
            self.output_fn("No valid moves available for computer!")
            return
        self.output_fn(f"Computer plays: {move[0]} {move[1]}")
        self._show_board("Board after computer's move:")

    def _outcome(self, forfeited: bool) -> SessionOutcome:
        black, white = self.game.get_score()
        human_score, computer_score = (black, white) if self.human == Cell.BLACK else (white, black)
        result = self.game.get_result()
        if forfeited:
            result = GameResult.WHITE_WINS if self.human == Cell.BLACK else GameResult.BLACK_WINS
        return SessionOutcome(result, human_score, computer_score, forfeited)

    def run(self) -> SessionOutcome:
        """Play until the game ends or the human forfeits."""
        self.output_fn(f"You are player {int(self.human)}")
        self._show_board("Initial board:")

        while not self.game.is_game_over():
            if self.game.current_player == self.human:
                if not self._human_turn():
                    return self._outcome(forfeited=True)
            else:
                self._computer_turn()

        outcome = self._outcome(forfeited=False)
        if outcome.computer_score > outcome.human_score:
            self.output_fn(f"Computer wins {outcome.computer_score}:{outcome.human_score}")
        elif outcome.human_score > outcome.computer_score:
            self.output_fn(f"You win {outcome.human_score}:{outcome.computer_score}")
        else:
            self.output_fn("It's a draw!")
        return outcome
