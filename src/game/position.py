"""
Position files and board printing.

A position file holds whitespace-separated integers: the side to move
(0 = Black, 1 = White) followed by the 64 cells in row-major order, where
0 is Black, 1 is White and 5 is an empty cell.
"""
import os
from typing import Tuple

from .board import Board, Cell

EMPTY_TOKEN = 5

_TOKEN_TO_CELL = {
    0: Cell.BLACK,
    1: Cell.WHITE,
    EMPTY_TOKEN: Cell.EMPTY,
}
_CELL_TO_TOKEN = {cell: token for token, cell in _TOKEN_TO_CELL.items()}


class PositionFormatError(ValueError):
    """Raised when a position file cannot be parsed."""


def parse_position(text: str) -> Tuple[Board, Cell]:
    """
    Parse the contents of a position file.

    Args:
        text: File contents

    Returns:
        Tuple of (board, player to move)
    """
    tokens = text.split()
    expected = 1 + Board.NUM_CELLS
    if len(tokens) != expected:
        raise PositionFormatError(f"Expected {expected} values, got {len(tokens)}")

    try:
        values = [int(token) for token in tokens]
    except ValueError as e:
        raise PositionFormatError(f"Position contains a non-integer value: {e}") from e

    turn = values[0]
    if turn not in (Cell.BLACK, Cell.WHITE):
        raise PositionFormatError(f"Turn must be 0 (Black) or 1 (White), got {turn}")

    cells = []
    for i, value in enumerate(values[1:]):
        if value not in _TOKEN_TO_CELL:
            row, col = divmod(i, Board.SIZE)
            raise PositionFormatError(f"Invalid cell value {value} at ({row}, {col})")
        cells.append(_TOKEN_TO_CELL[value])

    return Board.from_cells(cells), Cell(turn)


def load_position(filepath: str) -> Tuple[Board, Cell]:
    """Load a position file. Missing files raise FileNotFoundError."""
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Position file not found: {filepath}")
    with open(filepath, 'r') as f:
        return parse_position(f.read())


def format_position(board: Board, turn: Cell) -> str:
    lines = [str(int(turn))]
    for row in range(Board.SIZE):
        lines.append(' '.join(str(_CELL_TO_TOKEN[board[row, col]]) for col in range(Board.SIZE)))
    return '\n'.join(lines) + '\n'


def save_position(filepath: str, board: Board, turn: Cell):
    """Write a position file that load_position() reads back."""
    directory = os.path.dirname(os.path.abspath(filepath))
    os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w') as f:
        f.write(format_position(board, turn))


def format_board(board: Board) -> str:
    """Render the board with numbered rows and columns, using file tokens for cells."""
    lines = ["     " + "    ".join(str(col) for col in range(Board.SIZE))]
    for row in range(Board.SIZE):
        line = f"{row}    "
        for col in range(Board.SIZE):
            line += f"{_CELL_TO_TOKEN[board[row, col]]}    "
        lines.append(line)
    return "\n".join(lines)
