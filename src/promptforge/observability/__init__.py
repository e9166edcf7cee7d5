"""Observability module.

Provides structured logging for prompt composition.
"""

from promptforge.observability.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
