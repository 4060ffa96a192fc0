"""
Main script to play Othello against the minimax engine.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.logger import setup_logger
from src.game import Cell, ReversiGame
from src.game.session import InteractiveSession, DIFFICULTY_LABELS
from src.search import SearchEngine


def ask_difficulty(config: Config) -> int:
    """Prompt for a difficulty level until a valid one is entered."""
    print("Select difficulty level (1-5):")
    for i, label in enumerate(DIFFICULTY_LABELS, 1):
        print(f"{i}) {label}")
    while True:
        answer = input("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(config.search.difficulty_depths):
            return int(answer)
        print(f"Please enter a number between 1 and {len(config.search.difficulty_depths)}")


def main(argv=None):
    """Run one interactive game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello against a minimax engine')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--position', type=str, default=None,
                        help='Position file to start from (default: config game.position_file)')
    parser.add_argument('--difficulty', type=int, default=None,
                        help='Difficulty level 1-5 (asked interactively if omitted)')
    parser.add_argument('--human', type=int, choices=[0, 1], default=None,
                        help='Colour played by the human: 0 = Black, 1 = White')
    args = parser.parse_args(argv)

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    logger = setup_logger(config)
    log = logger.logger

    print("Welcome to Othello game")
    print("Note: Empty blocks are represented by 5")

    try:
        difficulty = args.difficulty if args.difficulty is not None else ask_difficulty(config)
        depth = config.search.depth_for_difficulty(difficulty)

        position_file = args.position or config.game.position_file
        if os.path.exists(position_file):
            game = ReversiGame.from_file(position_file)
            log.info(f"Loaded position from {position_file}")
        else:
            log.info(f"Position file {position_file} not found, starting from the standard opening")
            game = ReversiGame()

        human = Cell(args.human if args.human is not None else config.game.human_player)
        session = InteractiveSession(game, SearchEngine(depth), depth, human=human)
        outcome = session.run()
        logger.log_metrics({
            'human_score': outcome.human_score,
            'computer_score': outcome.computer_score,
            'forfeited': outcome.forfeited,
            'depth': depth,
        }, step=len(game.get_placements()), prefix='game/')
    except ValueError as e:
        log.error(f"Error: {e}")
        sys.exit(1)
    except EOFError:
        log.error("Input closed before the game finished")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()
