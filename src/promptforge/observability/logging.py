"""Structured logging configuration.

Package loggers are structlog loggers wrapped around standard library
loggers. Their events are handed to stdlib logging unrendered, so nothing
is printed until an application calls ``setup_logging``, which installs a
``ProcessorFormatter`` on the root logger. That formatter renders both
structlog events and plain stdlib records as JSON or console lines.
"""

import logging
import sys

import structlog

# Applied to every event, whether it came from structlog or plain stdlib logging
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]

EVENT_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    *SHARED_PROCESSORS,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


class _PromptForgeHandler(logging.StreamHandler):
    """Root handler installed by setup_logging, replaced on reconfiguration."""


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging with structlog.

    Installs a single handler on the root logger writing to stdout. Calling
    this again replaces the handler installed by the previous call and
    leaves other handlers alone.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output logs in JSON format; otherwise use console format

    Example:
        >>> setup_logging(log_level="DEBUG", json_logs=True)
        >>> get_logger(__name__).debug("prompt_composed", slots=3, length=42)
    """
    if json_logs:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )
    handler = _PromptForgeHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _PromptForgeHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper()))

    # Applications using structlog.get_logger share the same pipeline
    structlog.configure(
        processors=EVENT_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    The logger does not depend on global structlog configuration, so it
    stays silent until stdlib logging has a handler.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger proxying to ``logging.getLogger(name)``
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=EVENT_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
