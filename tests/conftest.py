"""Shared pytest fixtures."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from promptforge.observability.logging import _PromptForgeHandler


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Undo setup_logging: drop its root handler and structlog's global config."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, _PromptForgeHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
