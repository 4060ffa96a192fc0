"""
Othello game module.
This package contains the board, move rules, position files and game flow.
"""

from .board import Board, Cell, Move, opponent
from .moves import legal_moves, apply_move, has_legal_move, get_flips
from .game import ReversiGame, GameResult
from .position import load_position, save_position, parse_position, format_board, PositionFormatError

__all__ = [
    'Board', 'Cell', 'Move', 'opponent',
    'legal_moves', 'apply_move', 'has_legal_move', 'get_flips',
    'ReversiGame', 'GameResult',
    'load_position', 'save_position', 'parse_position', 'format_board', 'PositionFormatError',
]
