"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List
import json


@dataclass
class SearchConfig:
    """Configuration for the minimax search."""
    depth: int = 4
    # Search depth for difficulty levels 1 (extremely easy) to 5 (extremely hard)
    difficulty_depths: List[int] = field(default_factory=lambda: [1, 2, 4, 7, 10])

    def depth_for_difficulty(self, difficulty: int) -> int:
        """Map a 1-based difficulty level to a search depth."""
        if not 1 <= difficulty <= len(self.difficulty_depths):
            raise ValueError(
                f"Difficulty must be between 1 and {len(self.difficulty_depths)}, got {difficulty}"
            )
        return self.difficulty_depths[difficulty - 1]


@dataclass
class GameConfig:
    """Configuration for interactive games."""
    position_file: str = "positions/opening.txt"
    human_player: int = 0  # 0 = Black, 1 = White


@dataclass
class TournamentConfig:
    """Configuration for engine tournaments."""
    depths: List[int] = field(default_factory=lambda: [1, 2, 3])
    rounds: int = 2
    k: float = 32.0
    initial_rating: float = 1500.0
    opening_plies: int = 4  # Random plies played before the engines take over
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"


@dataclass
class LoggingConfig:
    """Configuration for logging and visualization."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    use_tensorboard: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-Minimax"
    seed: int = 42
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello-Minimax'),
            seed=config_dict.get('seed', 42),
            search=SearchConfig(**config_dict.get('search', {})),
            game=GameConfig(**config_dict.get('game', {})),
            tournament=TournamentConfig(**config_dict.get('tournament', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
