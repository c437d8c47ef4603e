"""Logging setup for the ilp-plugin-shared CLI.

Everything is rendered to stderr by one structlog ``ProcessorFormatter``:
stdlib records from package modules, structlog loggers, and Python
warnings captured with :func:`logging.captureWarnings`. A captured warning
is split into ``category``/``location`` fields with the warning text as
``event``, so a legacy ``account`` deprecation raised outside
ValidationService (which collects its own) renders as one structured record.

``--log-json`` switches the console renderer for JSON lines.
"""

from __future__ import annotations

import logging
import re
import sys
import warnings

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

PACKAGE_LOGGER = "ilp_plugin_shared"
WARNINGS_LOGGER = "py.warnings"

# First line of warnings.formatwarning(): "<file>:<line>: <Category>: <message>"
_WARNING_LINE = re.compile(r"(?P<location>.+?:\d+): (?P<category>\w+): (?P<message>.*)")


def split_warning(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Turn a ``py.warnings`` record into ``event``, ``category`` and ``location``."""
    if event_dict.get("logger") != WARNINGS_LOGGER:
        return event_dict
    first_line = str(event_dict.get("event", "")).split("\n", 1)[0]
    match = _WARNING_LINE.match(first_line)
    if match:
        event_dict["event"] = match["message"]
        event_dict["category"] = match["category"]
        event_dict["location"] = match["location"]
    return event_dict


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route package logs and Python warnings to stderr.

    Safe to call more than once; the root handler is replaced, not added.

    Args:
        verbose: Package logger at DEBUG (rejections are logged there).
            Otherwise WARNING.
        log_json: Render JSON lines instead of console output.
    """
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        split_warning,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("pluggy").setLevel(logging.WARNING)

    logging.captureWarnings(True)
    # DeprecationWarning is ignored outside __main__ unless a filter says otherwise.
    warnings.simplefilter("default", DeprecationWarning)
