"""Redacting structlog pipeline for credential-handling hosts.

credhash never passes a plaintext password or stored hash to a log call,
but the applications embedding it log around the same code paths. The
pipeline configured here scrubs credential-bearing keys (password=,
password_hash=, ...) from both structlog events and plain stdlib records
before any renderer sees them. CREDHASH_LOG_FORMAT picks JSON lines or the
console renderer; CREDHASH_LOG_LEVEL sets the root threshold.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

REDACTED = "**redacted**"

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {"password", "plain", "plaintext", "hashed", "password_hash", "stored", "secret"}
)


def redact_secrets(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of credential-bearing keys before rendering."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(log_format: str = "console", log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging integration.

    Args:
        log_format: "console" for dev-friendly output, "json" for production.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        redact_secrets,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Records from plain stdlib loggers are redacted too
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[redact_secrets, structlog.stdlib.add_log_level],
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
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def configure_logging_from_settings() -> None:
    """Configure logging from CREDHASH_* environment settings."""
    from credhash.core.config import get_settings

    cfg = get_settings()
    configure_logging(log_format=cfg.log_format, log_level=cfg.log_level)
