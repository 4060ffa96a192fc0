"""
Script for running tournaments between minimax engines of different search depths.
"""
import os
import sys
import argparse
from datetime import datetime

from src.arena import Arena, DepthRatings
from src.config import Config, get_default_config
from src.logger import setup_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run a tournament between Othello search depths')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')

    # Tournament parameters
    parser.add_argument('--depths', type=int, nargs='+', default=None,
                        help='Search depths to enter')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--opening-plies', type=int, default=None,
                        help='Random plies played before the engines take over')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random openings')

    # Output
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--elo-file', type=str, default=None,
                        help='File to save/load ratings, inside the output directory')
    parser.add_argument('--verbose', action='store_true', default=None,
                        help='Show progress and standings after every round (default: config logging.verbose)')

    return parser.parse_args(argv)


def load_config(args) -> Config:
    """Load the config file and apply command line overrides."""
    config = Config.load(args.config) if os.path.exists(args.config) else get_default_config()
    tournament = config.tournament

    if args.depths is not None:
        tournament.depths = args.depths
    if args.rounds is not None:
        tournament.rounds = args.rounds
    if args.opening_plies is not None:
        tournament.opening_plies = args.opening_plies
    if args.seed is not None:
        config.seed = args.seed
    if args.output_dir is not None:
        tournament.output_dir = args.output_dir
    if args.elo_file is not None:
        tournament.elo_file = args.elo_file
    if args.verbose is not None:
        config.logging.verbose = args.verbose

    return config


def main(argv=None):
    config = load_config(parse_args(argv))
    tournament = config.tournament

    logger = setup_logger(config)
    log = logger.logger

    os.makedirs(tournament.output_dir, exist_ok=True)

    ratings_file = os.path.join(tournament.output_dir, tournament.elo_file)
    if os.path.exists(ratings_file):
        log.info(f"Loading ratings from {ratings_file}")
        ratings = DepthRatings.load(ratings_file)
    else:
        log.info("Starting new ratings")
        ratings = DepthRatings(k=tournament.k, initial_rating=tournament.initial_rating)

    try:
        arena = Arena(tournament.depths, ratings=ratings,
                      opening_plies=tournament.opening_plies, seed=config.seed)
        log.info(f"Starting tournament with {tournament.rounds} rounds between depths {arena.depths}")
        summary = arena.run_tournament(rounds=tournament.rounds, verbose=config.logging.verbose)
    except ValueError as e:
        log.error(f"Error: {e}")
        logger.close()
        sys.exit(1)

    for pair in summary['pairs'].values():
        logger.log_metrics({
            'deep_wins': pair['deep_wins'],
            'shallow_wins': pair['shallow_wins'],
            'draws': pair['draws'],
            'mean_margin': pair['mean_margin'],
        }, step=pair['deep'], prefix=f"arena/d{pair['shallow']}/")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(tournament.output_dir, f'tournament_{timestamp}.json')
    arena.save_results(results_file, summary)
    ratings.save(ratings_file)

    print(f"\nTournament completed! Results saved to {results_file}")
    print("\nFinal standings:")
    print(arena.format_standings())
    logger.close()


if __name__ == '__main__':
    main()
