"""
Configuration parameters for the Othello console game.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

from .game.types import Player

@dataclass
class DisplayConfig:
    """Configuration for the console display."""
    show_valid_moves: bool = True
    pass_delay: float = 1.5  # Seconds to pause after a forced pass
    invalid_move_delay: float = 1.0

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None  # No file log when unset
    log_level: str = "INFO"
    verbose: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    starting_player: str = "black"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def starting_player_enum(self) -> Player:
        """Resolve starting_player ("black" / "white") to a Player."""
        try:
            return Player[self.starting_player.upper()]
        except KeyError:
            raise ValueError(f"Unknown starting player: {self.starting_player!r}") from None

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
            project_name=config_dict.get('project_name', 'Othello'),
            starting_player=config_dict.get('starting_player', 'black'),
            display=DisplayConfig(**config_dict.get('display', {})),
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
