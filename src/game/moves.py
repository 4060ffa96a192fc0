"""
Move generation and application for Othello.
Both operate on plain boards; neither keeps any state between calls.
"""
from typing import List
from .board import Board, Cell, Move, opponent, in_bounds

# Scan order: S, N, E, W, SE, SW, NE, NW
DIRECTIONS = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]


def legal_moves(board: Board, player: Cell) -> List[Move]:
    """
    Get all legal moves for the given player.

    Every piece of `player` is walked outward in each direction; a run of one or
    more opponent pieces ending on an empty cell makes that cell a legal move.
    Each destination is reported once, in the order it was first found.

    Args:
        board: Board to inspect (not modified)
        player: Cell.BLACK or Cell.WHITE

    Returns:
        List of (row, col) tuples; empty when the player has to pass
    """
    other = opponent(player)
    grid = board.to_rows()
    moves = []
    seen = set()

    for row, col in board.cells_of(player):
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            run = 0
            while in_bounds(r, c) and grid[r][c] == other:
                run += 1
                r += dr
                c += dc

            if run > 0 and in_bounds(r, c) and grid[r][c] == Cell.EMPTY and (r, c) not in seen:
                seen.add((r, c))
                moves.append((r, c))

    return moves


def has_legal_move(board: Board, player: Cell) -> bool:
    """Check if the player has at least one legal move."""
    return len(legal_moves(board, player)) > 0


def _flips_in_direction(grid: List[List[int]], move: Move, player: Cell, dr: int, dc: int) -> List[Move]:
    """Return the opponent run that `move` would capture along (dr, dc)."""
    other = opponent(player)
    row, col = move
    r, c = row + dr, col + dc
    run = []
    while in_bounds(r, c) and grid[r][c] == other:
        run.append((r, c))
        r += dr
        c += dc

    if run and in_bounds(r, c) and grid[r][c] == player:
        return run
    return []


def get_flips(board: Board, move: Move, player: Cell) -> List[Move]:
    """
    Get the pieces a move would flip, without touching the board.

    Returns:
        List of (row, col) tuples of captured opponent pieces
    """
    grid = board.to_rows()
    flips = []
    for dr, dc in DIRECTIONS:
        flips.extend(_flips_in_direction(grid, move, player, dr, dc))
    return flips


def apply_move(board: Board, move: Move, player: Cell) -> List[Move]:
    """
    Play `move` for `player`, mutating the board in place.

    The move must come from legal_moves(board, player); it is not re-validated.
    All eight directions are checked against the position before any piece is
    flipped, so captures in one direction never open or close another.

    Args:
        board: Board to mutate
        move: (row, col) of the new piece
        player: Cell.BLACK or Cell.WHITE

    Returns:
        List of (row, col) tuples that were flipped
    """
    flips = get_flips(board, move, player)
    board[move] = player
    for pos in flips:
        board[pos] = player
    return flips
