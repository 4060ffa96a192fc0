"""
Depth-versus-depth matches between minimax engines.

An engine is identified by nothing but its search depth. Every opening is
played twice with the colours swapped, and each game is recorded by its final
piece counts. Ratings follow from the win/draw/loss of each game, the margins
show by how much a deeper search wins.
"""
import json
import logging
import os
from dataclasses import dataclass, asdict, field
from itertools import combinations
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..game import ReversiGame, Cell, Move
from ..search import SearchEngine

logger = logging.getLogger(__name__)


@dataclass
class MatchRecord:
    """Final position summary of one arena game."""
    black_depth: int
    white_depth: int
    black_pieces: int
    white_pieces: int
    placements: int
    opening: List[Move] = field(default_factory=list)
    round: int = 0
    rating_change: float = 0.0  # for Black; White moved by the negative

    @property
    def margin(self) -> int:
        """Black pieces minus white pieces."""
        return self.black_pieces - self.white_pieces

    @property
    def black_score(self) -> float:
        if self.margin > 0:
            return 1.0
        if self.margin < 0:
            return 0.0
        return 0.5

    def margin_for(self, depth: int) -> int:
        """Final margin seen from the engine searching at `depth`."""
        if depth == self.black_depth:
            return self.margin
        if depth == self.white_depth:
            return -self.margin
        raise ValueError(f"Depth {depth} did not play this game")

    def to_dict(self) -> Dict:
        record = asdict(self)
        record['margin'] = self.margin
        return record


class DepthRatings:
    """ELO ratings keyed by search depth."""

    def __init__(self, k: float = 32.0, initial_rating: float = 1500.0):
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[int, float] = {}
        self.games: Dict[int, int] = {}

    def rating(self, depth: int) -> float:
        return self.ratings.get(depth, self.initial_rating)

    def expected(self, depth: int, against: int) -> float:
        """Expected score of `depth` against `against` under the current ratings."""
        return 1.0 / (1.0 + 10.0 ** ((self.rating(against) - self.rating(depth)) / 400.0))

    def update(self, record: MatchRecord) -> float:
        """
        Apply one finished game.

        Returns:
            Rating change of the Black engine; the White engine gets the negative
        """
        black, white = record.black_depth, record.white_depth
        change = self.k * (record.black_score - self.expected(black, white))

        self.ratings[black] = self.rating(black) + change
        self.ratings[white] = self.rating(white) - change
        self.games[black] = self.games.get(black, 0) + 1
        self.games[white] = self.games.get(white, 0) + 1
        return change

    def standings(self) -> List[Dict]:
        """Depths ordered by rating, shallower first on equal ratings."""
        order = sorted(self.ratings, key=lambda depth: (-self.ratings[depth], depth))
        return [{'depth': depth, 'rating': self.ratings[depth], 'games': self.games.get(depth, 0)}
                for depth in order]

    def save(self, filepath: str):
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        data = {
            'k': self.k,
            'initial_rating': self.initial_rating,
            # JSON object keys are strings
            'ratings': {str(depth): rating for depth, rating in self.ratings.items()},
            'games': {str(depth): games for depth, games in self.games.items()},
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'DepthRatings':
        with open(filepath, 'r') as f:
            data = json.load(f)
        ratings = cls(k=data['k'], initial_rating=data['initial_rating'])
        ratings.ratings = {int(depth): float(r) for depth, r in data['ratings'].items()}
        ratings.games = {int(depth): int(n) for depth, n in data.get('games', {}).items()}
        return ratings


class Arena:
    """Plays minimax engines of different depths against each other."""

    def __init__(self, depths: List[int], ratings: Optional[DepthRatings] = None,
                 opening_plies: int = 0, seed: Optional[int] = None):
        """
        Initialize the arena.

        Args:
            depths: Search depths entered; duplicates are dropped
            ratings: Existing ratings to continue from
            opening_plies: Random legal plies played from the standard opening before
                the engines take over, so deterministic engines see different games
            seed: Seed for those random plies
        """
        self.depths = sorted(set(depths))
        if any(depth < 1 for depth in self.depths):
            raise ValueError(f"Search depths must be at least 1, got {self.depths}")

        self.engines = {depth: SearchEngine(depth) for depth in self.depths}
        self.ratings = ratings if ratings is not None else DepthRatings()
        self.opening_plies = opening_plies
        self.rng = np.random.default_rng(seed)
        self.records: List[MatchRecord] = []

    def random_opening(self) -> ReversiGame:
        game = ReversiGame()
        for _ in range(self.opening_plies):
            if game.is_game_over():
                break
            moves = game.get_valid_moves()
            if not moves:
                game.pass_turn()
                continue
            row, col = moves[self.rng.integers(len(moves))]
            game.make_move(row, col)
        return game

    def play_game(self, black_depth: int, white_depth: int, game: Optional[ReversiGame] = None,
                  verbose: bool = False) -> MatchRecord:
        """
        Play one game to the end.

        Args:
            black_depth: Depth of the engine playing Black
            white_depth: Depth of the engine playing White
            game: Position to continue from (default: a fresh random opening)
            verbose: Print every position

        Returns:
            MatchRecord of the finished game
        """
        for depth in (black_depth, white_depth):
            if depth not in self.engines:
                raise ValueError(f"No engine entered at depth {depth}; entered: {self.depths}")

        if game is None:
            game = self.random_opening()
        opening = list(game.get_placements())
        depth_of = {Cell.BLACK: black_depth, Cell.WHITE: white_depth}

        while not game.is_game_over():
            depth = depth_of[game.current_player]
            move = game.play_engine_move(self.engines[depth], depth)
            if verbose:
                print(f"depth {depth}: {'pass' if move is None else move}")
                print(game)

        black, white = game.get_score()
        record = MatchRecord(black_depth=black_depth, white_depth=white_depth,
                             black_pieces=black, white_pieces=white,
                             placements=len(game.get_placements()), opening=opening)
        logger.info("d%d (Black) %d - %d d%d (White)", black_depth, black, white, white_depth)
        return record

    def run_tournament(self, rounds: int = 2, verbose: bool = False) -> Dict:
        """
        Play every pair of depths `rounds` times, each time from a new opening
        played once with each colour assignment.

        Returns:
            summary() of the games played in this call
        """
        if len(self.depths) < 2:
            raise ValueError("Need at least 2 different depths for a tournament")

        pairs = list(combinations(self.depths, 2))
        games = []
        with tqdm(total=rounds * len(pairs) * 2, desc="Arena", disable=not verbose) as progress:
            for round_num in range(1, rounds + 1):
                for shallow, deep in pairs:
                    opening = self.random_opening()
                    for black, white in ((shallow, deep), (deep, shallow)):
                        record = self.play_game(black, white, game=opening.copy())
                        record.round = round_num
                        record.rating_change = self.ratings.update(record)
                        games.append(record)
                        progress.update(1)

                if verbose:
                    print(f"\nAfter round {round_num}:")
                    print(self.format_standings())

        self.records.extend(games)
        return self.summary(games)

    def summary(self, games: Optional[List[MatchRecord]] = None) -> Dict:
        """
        Aggregate games per pair of depths.

        Each pair reports wins of the deeper and the shallower engine, draws,
        and the final piece margins from the deeper engine's side.
        """
        games = self.records if games is None else games
        pairs: Dict[str, Dict] = {}
        margins: Dict[str, List[int]] = {}

        for record in games:
            shallow, deep = sorted((record.black_depth, record.white_depth))
            key = f"d{shallow}-d{deep}"
            stats = pairs.setdefault(key, {'shallow': shallow, 'deep': deep, 'games': 0,
                                           'deep_wins': 0, 'shallow_wins': 0, 'draws': 0})
            margin = record.margin_for(deep)
            stats['games'] += 1
            if margin > 0:
                stats['deep_wins'] += 1
            elif margin < 0:
                stats['shallow_wins'] += 1
            else:
                stats['draws'] += 1
            margins.setdefault(key, []).append(margin)

        for key, values in margins.items():
            pairs[key]['mean_margin'] = float(np.mean(values))
            pairs[key]['margins'] = values

        return {
            'games': [record.to_dict() for record in games],
            'pairs': pairs,
            'standings': self.ratings.standings(),
        }

    def format_standings(self) -> str:
        lines = ["Depth   Rating  Games"]
        for entry in self.ratings.standings():
            lines.append(f"{entry['depth']:5d}  {entry['rating']:7.1f}  {entry['games']:5d}")
        return "\n".join(lines)

    def save_results(self, filepath: str, summary: Optional[Dict] = None):
        """Write summary() (or the given summary) as JSON."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(summary if summary is not None else self.summary(), f, indent=2)
