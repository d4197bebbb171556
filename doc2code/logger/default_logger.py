"""Default logger backed by the standard ``logging`` module.

Records are rendered as::

    [2024-05-01T12:00:00.123+00:00] [INFO] SDK generated provider=groq sdk_length=1234

and, when a log directory is configured, appended to a date-named file
(``logs/2024-05-01.log``) that the log viewer CLI reads.
"""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from doc2code.logger.interface import Logger


def format_fields(fields: Dict[str, Any]) -> str:
    """Render structured fields as ``key=value`` pairs."""
    parts = []
    for key, value in fields.items():
        text = str(value)
        if " " in text:
            text = repr(text)
        parts.append(f"{key}={text}")
    return " ".join(parts)


class _Doc2CodeFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="milliseconds"
        )
        line = f"[{timestamp}] [{record.levelname}] {record.getMessage()}"
        fields = getattr(record, "fields", None)
        if fields:
            line = f"{line} {format_fields(fields)}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class DatedFileHandler(logging.FileHandler):
    """File handler that writes to ``<log_dir>/<YYYY-MM-DD>.log`` and rolls at midnight."""

    def __init__(self, log_dir: Union[str, Path], encoding: str = "utf-8"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._current_date = date.today()
        super().__init__(self._path_for(self._current_date), encoding=encoding, delay=True)

    def _path_for(self, day: date) -> str:
        return str(self.log_dir / f"{day.isoformat()}.log")

    def emit(self, record: logging.LogRecord) -> None:
        today = date.today()
        if today != self._current_date:
            self.acquire()
            try:
                self.close()
                self._current_date = today
                self.baseFilename = self._path_for(today)
            finally:
                self.release()
        super().emit(record)


class DefaultLogger(Logger):
    """Logger writing to stderr and, optionally, to date-named files."""

    def __init__(
        self,
        name: str = "doc2code",
        level: int = logging.INFO,
        log_dir: Optional[Union[str, Path]] = None,
    ):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        formatter = _Doc2CodeFormatter()
        # Re-creating a logger with the same name must not duplicate output
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        self._logger.addHandler(console)

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            file_handler = DatedFileHandler(self.log_dir)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    def _log(self, level: int, message: str, kwargs: Dict[str, Any]) -> None:
        exc_info = kwargs.pop("exc_info", None)
        self._logger.log(level, message, extra={"fields": kwargs}, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)
