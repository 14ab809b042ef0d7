# core/logging.py
import sys
import logging
import structlog
from pathlib import Path
from career_advisor.config.settings import Settings, get_settings

def configure_logging(settings: Settings = None, log_file: str = None, log_to_console: bool = None):
    """Configure structlog for JSON logging to file or console output"""

    if settings is None:
        settings = get_settings()
    if log_file is None:
        log_file = settings.log_file
    if log_to_console is None:
        log_to_console = settings.log_to_console

    # Shared processors
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_file:
        # Ensure log directory exists
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        # JSON renderer for file
        processors = shared_processors + [
            structlog.processors.JSONRenderer()
        ]
        logger_factory = structlog.WriteLoggerFactory(
            file=open(log_file, "a")
        )
    elif log_to_console:
        # Console renderer for development
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer()
        ]
        logger_factory = structlog.PrintLoggerFactory(file=sys.stdout)
    else:
        processors = shared_processors
        logger_factory = structlog.ReturnLoggerFactory()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )

def get_logger(name: str):
    """Get a structured logger for the given module name"""
    return structlog.get_logger(name)
