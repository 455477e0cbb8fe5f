"""structlog configuration.

- development: colourised console output
- production: JSON lines
"""

import logging
import sys
from typing import Optional

import structlog

NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anyio")


def setup_logging(level: str = "INFO", json_logs: Optional[bool] = None) -> None:
    """Configure structlog and route it through the stdlib root logger.

    Args:
        level: Log level name
        json_logs: Render JSON instead of console output; defaults to the
            ``environment`` setting
    """
    if json_logs is None:
        from commitcast.models.config import get_settings

        json_logs = get_settings().is_production

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

