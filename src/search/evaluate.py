"""
Leaf evaluation for the minimax search.
"""
from ..game.board import Board, Cell, opponent


def evaluate(board: Board, perspective: Cell) -> int:
    """
    Score the board as a material difference from `perspective`'s point of view.

    Returns:
        (pieces of perspective) - (pieces of the opponent)
    """
    return board.count(perspective) - board.count(opponent(perspective))
