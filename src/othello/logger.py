"""
Logging utilities for the Othello console game.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class Logger:
    """Console and optional file logging for a game session."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir).
                No file log is written when both are unset.
        """
        self.config = config
        self.logger = logging.getLogger('othello')
        self.previous_level = self.logger.level
        self.log_dir = log_dir or config.logging.log_dir
        self.run_dir = None
        self.handlers = []

        level = logging.DEBUG if config.logging.verbose else getattr(
            logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter(FORMAT)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        if self.log_dir:
            run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def close(self):
        """Remove and close the handlers this logger installed and restore the level."""
        if self.handlers:
            self.logger.setLevel(self.previous_level)
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
