"""Logging setup for the flappy package."""

import logging
import sys

ROOT_LOGGER = "flappy"


class TickFormatter(logging.Formatter):
    """One short line per record, module name without the package prefix."""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname).1s] %(short_name)s: %(message)s", "%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.short_name = record.name.rpartition(".")[2]
        return super().format(record)


def setup_logging(level: str = "info") -> None:
    """Configure the flappy root logger to write to stderr."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(TickFormatter())
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the flappy namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
