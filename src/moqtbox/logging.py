"""
Structured logging for moqtbox using structlog.

Log records always go to stderr: stdout carries the settings and profile
exports, which must stay parseable.
"""

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _stderr_renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """
    Route moqtbox logs to stderr and, optionally, a JSON log file.

    Safe to call once per CLI invocation; earlier handlers are replaced.

    Args:
        level: Log level name, as given to ``--log-level``
        json_output: Render stderr records as JSON (``--json-logs``)
        log_file: Also append JSON records here (``--log-file``)
    """
    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_stderr_renderer(json_output),
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    handlers = [stderr_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


def bind_cli_context(command: Optional[str], root: Path) -> None:
    """Attach the running subcommand and project root to every later record."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command or "help", root=str(root))


def get_logger(name: str = "moqtbox") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def log_operation(
    logger: structlog.stdlib.BoundLogger, operation: str, **context
) -> Iterator[structlog.stdlib.BoundLogger]:
    """
    Emit ``<operation>.started`` then ``.completed`` or ``.failed``.

    Failures are logged with the exception type and re-raised unchanged.

    Usage:
        with log_operation(log, "resolve_settings", root=str(root)):
            settings = resolve_project_settings(root)
    """
    bound = logger.bind(operation=operation, **context)
    started = time.perf_counter()
    bound.info(f"{operation}.started")

    try:
        yield bound
    except Exception as e:
        bound.error(
            f"{operation}.failed",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        raise

    bound.info(
        f"{operation}.completed",
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
