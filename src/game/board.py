"""
Board module for Othello.
Holds the 8x8 grid of cell states and the derived queries on it.
"""
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np


class Cell(IntEnum):
    """State of a single board cell. BLACK and WHITE double as player identities."""
    BLACK = 0
    WHITE = 1
    EMPTY = 2


Move = Tuple[int, int]


def opponent(player: Cell) -> Cell:
    """Return the other player."""
    if player == Cell.BLACK:
        return Cell.WHITE
    if player == Cell.WHITE:
        return Cell.BLACK
    raise ValueError(f"Not a player: {player!r}")


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE


class Board:
    """
    Represents the Othello board as an owned 8x8 numpy buffer.
    Copies are full value copies; no two boards ever share a grid.
    """

    SIZE = 8
    NUM_CELLS = SIZE * SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 8x8 array of Cell values. If None, the board is empty.
        """
        if grid is None:
            self._grid = np.full((self.SIZE, self.SIZE), Cell.EMPTY, dtype=np.int8)
            return

        grid = np.asarray(grid)
        if grid.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got shape {grid.shape}")
        if not np.isin(grid, [c.value for c in Cell]).all():
            raise ValueError("Board contains values that are not valid cell states")
        self._grid = grid.astype(np.int8, copy=True)

    @classmethod
    def initial(cls) -> 'Board':
        """Create the standard opening position."""
        board = cls()
        mid = cls.SIZE // 2
        board[mid - 1, mid - 1] = Cell.WHITE
        board[mid, mid] = Cell.WHITE
        board[mid - 1, mid] = Cell.BLACK
        board[mid, mid - 1] = Cell.BLACK
        return board

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> 'Board':
        """Build a board from 64 cell values in row-major order."""
        if len(cells) != cls.NUM_CELLS:
            raise ValueError(f"Expected {cls.NUM_CELLS} cells, got {len(cells)}")
        grid = np.array([int(c) for c in cells], dtype=np.int8).reshape(cls.SIZE, cls.SIZE)
        return cls(grid)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._grid = self._grid.copy()
        return new_board

    def __getitem__(self, pos: Move) -> Cell:
        row, col = pos
        return Cell(int(self._grid[row, col]))

    def __setitem__(self, pos: Move, value: Cell) -> None:
        row, col = pos
        self._grid[row, col] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for value in self._grid.flat:
            yield Cell(int(value))

    def cells_of(self, player: Cell) -> List[Move]:
        """Return the coordinates of every cell holding `player`, row-major."""
        rows, cols = np.nonzero(self._grid == player)
        return list(zip(rows.tolist(), cols.tolist()))

    def count(self, cell: Cell) -> int:
        """Count the cells in the given state."""
        return int(np.count_nonzero(self._grid == cell))

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current piece counts.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.count(Cell.BLACK), self.count(Cell.WHITE)

    def empty_count(self) -> int:
        return self.count(Cell.EMPTY)

    def is_full(self) -> bool:
        """Check if no empty cells remain."""
        return self.empty_count() == 0

    def get_board_state(self) -> np.ndarray:
        """
        Get the board as a numpy array.

        Returns:
            Copy of the 8x8 int8 grid holding Cell values
        """
        return self._grid.copy()

    def to_rows(self) -> List[List[int]]:
        """Snapshot of the grid as nested Python lists, for tight scanning loops."""
        return self._grid.tolist()

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}
        rows = []
        for i in range(self.SIZE):
            rows.append(' '.join(symbols[self[i, j]] for j in range(self.SIZE)))
        black, white = self.get_score()
        rows.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(rows)

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(black={black}, white={white}, empty={self.empty_count()})"
