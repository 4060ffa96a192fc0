"""
Logging utilities for the Othello engine.
"""
import os
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config


class Logger:
    """Logger for game and tournament metrics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        self.logger = logging.getLogger()
        self.handlers = []
        self.writer = None

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'othello.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure root logger
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        # Initialize TensorBoard
        if config.logging.use_tensorboard:
            from torch.utils.tensorboard import SummaryWriter
            self.writer = SummaryWriter(log_dir=os.path.join(self.run_dir, 'tensorboard'))

        if config.logging.log_to_file:
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to console and TensorBoard.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (move number, game number, ...)
            prefix: Prefix for metric names (e.g., 'search/', 'arena/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

        if self.writer is not None:
            for name, value in metrics.items():
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    self.writer.add_scalar(f"{prefix}{name}", value, step)

    def log_text(self, tag: str, text: str, step: int = 0):
        """Log text to TensorBoard."""
        if self.writer is not None:
            self.writer.add_text(tag, text, step)

    def close(self):
        """Close the logger and flush all pending logs."""
        if self.writer is not None:
            self.writer.flush()
            self.writer.close()
            self.writer = None

        # Remove our handlers to prevent duplicate logging
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config, log_dir: Optional[str] = None) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object
        log_dir: Optional override of config.logging.log_dir

    Returns:
        Logger instance
    """
    return Logger(config, log_dir)
