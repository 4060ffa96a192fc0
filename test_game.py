"""
Test script for the Othello game driver.
"""
import numpy as np

from src.game import Board, Cell, ReversiGame, GameResult, save_position
from src.search import SearchEngine


def _board(pieces):
    board = Board()
    for pos, cell in pieces.items():
        board[pos] = cell
    return board


def test_initial_game():
    """Test the initial game setup."""
    game = ReversiGame()
    board = game.get_board_state()

    assert board.shape == (8, 8), "Board should be 8x8"
    assert board[3][3] == Cell.WHITE
    assert board[3][4] == Cell.BLACK
    assert np.sum(board == Cell.EMPTY) == 60, "Should have 60 empty squares initially"
    assert game.current_player == Cell.BLACK
    assert not game.is_game_over()
    assert game.get_result() is None


def test_valid_moves():
    """Test valid move generation."""
    game = ReversiGame()
    expected_moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert set(game.get_valid_moves()) == set(expected_moves)


def test_make_move():
    """Test making moves and capturing pieces."""
    game = ReversiGame()

    assert game.make_move(2, 3), "Should be a valid move"
    board = game.get_board_state()

    assert board[2][3] == Cell.BLACK, "Move should place black piece"
    assert board[3][3] == Cell.BLACK, "Should capture white piece"
    assert game.current_player == Cell.WHITE, "Should be white's turn"
    assert game.move_history[-1]['flipped'] == [(3, 3)]


def test_illegal_move_rejected():
    game = ReversiGame()
    before = game.board.copy()

    assert not game.make_move(0, 0)
    assert not game.make_move(3, 3), "Occupied cell is never legal"
    assert game.board == before
    assert game.current_player == Cell.BLACK


def test_pass_only_without_moves():
    game = ReversiGame()
    assert not game.pass_turn()

    game = ReversiGame(_board({(0, 0): Cell.BLACK, (0, 1): Cell.WHITE}), turn=Cell.WHITE)
    assert game.pass_turn()
    assert game.current_player == Cell.BLACK


def test_game_does_not_alias_start_board():
    board = Board.initial()
    game = ReversiGame(board)
    game.make_move(2, 3)
    assert board == Board.initial()

    game.reset()
    assert game.board == Board.initial()
    assert game.move_history == []


def test_game_over_on_full_board():
    grid = np.full((8, 8), int(Cell.WHITE))
    grid[0, :3] = Cell.BLACK
    game = ReversiGame(Board(grid))

    assert game.is_game_over()
    assert game.get_winner() == Cell.WHITE
    assert game.get_result() == GameResult.WHITE_WINS


def test_draw_on_equal_counts():
    grid = np.full((8, 8), int(Cell.BLACK))
    grid[4:, :] = Cell.WHITE
    game = ReversiGame(Board(grid))

    assert game.is_game_over()
    assert game.get_winner() is None
    assert game.get_result() == GameResult.DRAW


def test_game_over_when_nobody_can_move():
    """A board with empty cells is still finished if neither side has a move."""
    game = ReversiGame(_board({(3, 3): Cell.BLACK, (3, 4): Cell.BLACK}))

    assert not game.board.is_full()
    assert game.is_game_over()
    assert game.get_result() == GameResult.BLACK_WINS


def test_full_game_skips_passes():
    # White cannot move; Black captures and leaves White with no pieces
    game = ReversiGame(_board({(0, 0): Cell.BLACK, (0, 1): Cell.WHITE}), turn=Cell.WHITE)
    moves = game.play_full_game(SearchEngine(), depth=2)

    assert moves == [(0, 2)]
    assert game.move_history[0]['move'] is None, "White's turn is recorded as a pass"
    assert game.get_score() == (3, 0)
    assert game.get_result() == GameResult.BLACK_WINS


def test_full_game_from_opening():
    for depth in (1, 2):
        game = ReversiGame()
        moves = game.play_full_game(SearchEngine(depth), depth)

        black, white = game.get_score()
        assert game.is_game_over()
        assert black + white <= 64
        assert black + white == len(moves) + 4
        assert moves == game.get_placements()


def test_full_game_is_reproducible():
    first = ReversiGame().play_full_game(SearchEngine(2), 2)
    second = ReversiGame().play_full_game(SearchEngine(2), 2)
    assert first == second


def test_play_engine_move_uses_search():
    game = ReversiGame()
    move = game.play_engine_move(SearchEngine(1), 1)
    assert move == (2, 3)
    assert game.current_player == Cell.WHITE


def test_copy_is_independent():
    game = ReversiGame()
    copy = game.copy()
    copy.make_move(2, 3)

    assert game.board == Board.initial()
    assert game.move_history == []
    assert len(copy.move_history) == 1


def test_from_file(tmp_path):
    path = tmp_path / "position.txt"
    board = Board.initial()
    board[2, 3] = Cell.BLACK
    board[3, 3] = Cell.BLACK
    save_position(str(path), board, Cell.WHITE)

    game = ReversiGame.from_file(str(path))
    assert game.board == board
    assert game.current_player == Cell.WHITE


def test_turn_given_as_int():
    game = ReversiGame(Board.initial(), turn=0)
    assert game.current_player is Cell.BLACK
    assert game.make_move(2, 3)
    assert game.current_player is Cell.WHITE
    assert game.move_history[-1]['player'] is Cell.BLACK
    assert game.play_engine_move(SearchEngine(1), 1) is not None


if __name__ == "__main__":
    print("Running Othello game tests...\n")

    test_initial_game()
    test_valid_moves()
    test_make_move()
    test_full_game_from_opening()

    print("\nAll tests passed successfully!")
