"""structlog-formatted output for fnkit's own loggers.

fnkit modules log through stdlib ``logging.getLogger(__name__)`` and install
no handlers by default, so records simply propagate to whatever the host
application set up. :func:`configure_logging` opts in to fnkit-owned output
instead: one stderr handler on the ``fnkit`` logger, formatted by structlog.
The root logger and structlog's global configuration are left alone.

Two output modes:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (``log_json=True``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

from fnkit.config.models import LoggingConfig

LIBRARY_LOGGER = "fnkit"

# Marks handlers installed here so reconfiguring replaces only our own.
_HANDLER_FLAG = "_fnkit_handler"


def _formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``fnkit.*`` records to stderr through a structlog formatter.

    Safe to call repeatedly: a handler installed by an earlier call is
    replaced, handlers added by the host application are kept. The
    ``fnkit`` logger stops propagating so records are not printed twice.

    Args:
        verbose: Emit fnkit DEBUG records (cache misses, evictions).
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The installed handler.
    """
    lib = logging.getLogger(LIBRARY_LOGGER)
    for existing in [h for h in lib.handlers if getattr(h, _HANDLER_FLAG, False)]:
        lib.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(log_json=log_json))
    setattr(handler, _HANDLER_FLAG, True)

    lib.addHandler(handler)
    lib.setLevel(logging.DEBUG if verbose else logging.WARNING)
    lib.propagate = False
    return handler


def configure_from_config(config: LoggingConfig) -> logging.Handler:
    """Apply a ``[logging]`` section, e.g. ``get_settings().logging``."""
    return configure_logging(verbose=config.verbose, log_json=config.log_json)


def reset_logging() -> None:
    """Remove fnkit's handler and hand records back to the host's loggers."""
    lib = logging.getLogger(LIBRARY_LOGGER)
    for existing in [h for h in lib.handlers if getattr(h, _HANDLER_FLAG, False)]:
        lib.removeHandler(existing)
    lib.setLevel(logging.NOTSET)
    lib.propagate = True
