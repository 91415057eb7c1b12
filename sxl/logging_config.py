"""
Logging configuration for sxl.
Structured logging through structlog on top of the standard library, written to
stderr so that stdout only carries the launch report.
"""

import os
import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime, timezone

import structlog
from structlog.types import FilteringBoundLogger


class LogConfig:
    """Configuration class for logging setup."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        env = os.environ if environ is None else environ
        self.log_level = env.get('LOG_LEVEL', 'WARNING').upper()
        self.log_format = env.get('LOG_FORMAT', 'console')  # json or console
        log_file = env.get('LOG_FILE')
        self.log_file = Path(log_file) if log_file else None
        self.max_log_size = int(env.get('MAX_LOG_SIZE_MB', '10')) * 1024 * 1024
        self.backup_count = int(env.get('LOG_BACKUP_COUNT', '3'))

        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            self.log_level = 'WARNING'


def add_timestamp(logger: FilteringBoundLogger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat(timespec="seconds")
    return event_dict


def add_service_context(logger: FilteringBoundLogger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service context information."""
    event_dict["service"] = "sxl"
    event_dict.setdefault("component", "unknown")
    return event_dict


def setup_logging(config: Optional[LogConfig] = None) -> None:
    """
    Set up logging for a run of the command line tool.

    Args:
        config: LogConfig instance, creates default if None
    """
    if config is None:
        config = LogConfig()

    # Standard library logging carries the rendered structlog events
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_service_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.log_format == 'json':
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    if config.log_file:
        setup_file_logging(config)

    configure_third_party_loggers()


def setup_file_logging(config: LogConfig) -> None:
    """Copy log output to a rotating file."""
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        config.log_file,
        maxBytes=config.max_log_size,
        backupCount=config.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, config.log_level))
    logging.getLogger().addHandler(file_handler)


def configure_third_party_loggers() -> None:
    """Configure logging levels for third-party libraries."""
    for logger_name in ('aiohttp', 'asyncio'):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str, component: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)
        component: Component name for categorization

    Returns:
        Lazy structlog logger, resolved against the configuration in force
        when it logs so module level loggers follow setup_logging()
    """
    if component:
        return structlog.get_logger(name, component=component)

    return structlog.get_logger(name)


class TimedOperation:
    """Context manager for timing operations with logging."""

    def __init__(self, logger: FilteringBoundLogger, operation_name: str,
                 failure_level: str = "error", **context):
        self.logger = logger
        self.operation_name = operation_name
        self.failure_level = failure_level
        self.context = context
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(
            f"Starting {self.operation_name}",
            operation=self.operation_name,
            **self.context
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now(timezone.utc) - self.start_time).total_seconds()

        if exc_type:
            getattr(self.logger, self.failure_level)(
                f"Failed {self.operation_name}",
                operation=self.operation_name,
                duration_seconds=self.duration,
                exc_type=exc_type.__name__,
                exc_value=str(exc_val),
                **self.context
            )
        else:
            self.logger.info(
                f"Completed {self.operation_name}",
                operation=self.operation_name,
                duration_seconds=self.duration,
                **self.context
            )
