"""
Logging configuration for networking

Provides the package logger hierarchy with optional console and file output.
Library code only asks for module loggers; applications call setup_logging().
"""

import logging
import sys
from pathlib import Path

from .config import Config, config

LOGGER_NAME = "networking"


class NetworkingLogger:
    """Centralized logger for the package"""

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_file: Path | None = None,
        console_output: bool = True,
        console_level: int | str = logging.INFO,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "networking" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
            console_level: Minimum level for the console handler
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(
    log_file: Path | None = None, verbose: bool = True, config_obj: Config | None = None
) -> logging.Logger:
    """
    Setup logging for an application using the networking package

    Args:
        log_file: Optional file receiving DEBUG and above
        verbose: Whether to also print to console
        config_obj: Config object (optional, uses global config if None)

    Returns:
        Configured package logger
    """
    if config_obj is None:
        config_obj = config

    level = str(config_obj.get("logging.level", "INFO")).upper()

    logger_wrapper = NetworkingLogger(
        name=LOGGER_NAME, log_file=log_file, console_output=verbose, console_level=level
    )
    return logger_wrapper.get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'executor', 'http_client')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
