"""
Configuration parameters for the Reversi engine and its console front end.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class GameConfig:
    """Configuration for how the board is presented."""
    show_legal_moves: bool = True  # Mark cells the active player may play
    show_score: bool = True
    empty_symbol: str = "."
    black_symbol: str = "B"
    white_symbol: str = "W"
    legal_symbol: str = "*"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None  # No log file when unset
    log_level: str = "INFO"
    verbose: bool = True  # Echo log records to the console


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    game: GameConfig = field(default_factory=GameConfig)
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
            project_name=config_dict.get('project_name', 'Reversi'),
            game=GameConfig(**config_dict.get('game', {})),
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
