"""Logging setup for the regcheck CLI.

Service modules log through stdlib ``logging``; structlog's
``ProcessorFormatter`` renders those records and native structlog events
alike, as console text or as one JSON object per line (``--log-json``).
Everything goes to stderr so stdout stays reserved for results.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PACKAGE_LOGGER = "regcheck"


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to every event before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route all logging to a single stderr handler.

    Safe to call repeatedly: the root handlers are replaced, not appended.

    Args:
        verbose: Let ``regcheck.*`` loggers emit DEBUG; otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
    """
    pre_chain = _pre_chain()
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
