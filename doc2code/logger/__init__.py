"""
Logger module for doc2code

This module provides a small logging interface so components can be handed
any logger implementation.

Usage:
    from doc2code.logger import Logger, DefaultLogger

    # Console and dated log files under ./logs
    logger = DefaultLogger(log_dir="logs")
    logger.info("Application started", port=8000)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            ...
"""

import logging

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.DEBUG)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
