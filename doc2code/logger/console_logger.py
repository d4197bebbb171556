"""Console-only logger."""

import logging

from doc2code.logger.default_logger import DefaultLogger


class ConsoleLogger(DefaultLogger):
    """DefaultLogger without file output, used by tests and CLI tools."""

    def __init__(self, name: str = "doc2code.console", level: int = logging.INFO):
        super().__init__(name=name, level=level, log_dir=None)
