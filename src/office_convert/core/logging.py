"""Logging helpers shared across office-convert commands."""

from __future__ import annotations

import json
import logging
import sys
import tempfile
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

__all__ = [
    "JsonLogFormatter",
    "configure_logger",
]

_FILE_MARKER = "_office_convert_file"
_CONSOLE_MARKER = "_office_convert_console"


class JsonLogFormatter(logging.Formatter):
    """Emit log records as structured JSON lines."""

    _RESERVED = frozenset(
        {
            "name",
            "msg",
            "args",
            "levelname",
            "levelno",
            "pathname",
            "filename",
            "module",
            "exc_info",
            "exc_text",
            "stack_info",
            "lineno",
            "funcName",
            "created",
            "msecs",
            "relativeCreated",
            "thread",
            "threadName",
            "processName",
            "process",
            "taskName",
            "message",
            "asctime",
        }
    )

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {
            key: _coerce_value(value)
            for key, value in record.__dict__.items()
            if key not in self._RESERVED
        }
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info
        return json.dumps(payload, ensure_ascii=True)


def configure_logger(
    name: str,
    *,
    log_dir: Path,
    level: str = "INFO",
    verbose: bool = False,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    filename: str | None = None,
) -> tuple[logging.Logger, Path]:
    """Attach a rotating JSON file handler to ``name`` and return it.

    Calling this repeatedly reuses the handler installed by the first call,
    so the CLI can be driven several times in one process. With
    ``verbose`` a plain-text stderr handler is added at DEBUG level.
    """

    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    log_name = filename or f"{name.rsplit('.', 1)[-1]}.log"
    target = _prepare_log_file(_prepare_log_dir(log_dir), log_name)

    handler, active_path = _ensure_file_handler(
        logger,
        path=target,
        filename=log_name,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
    handler.setLevel(logging.DEBUG if verbose else _coerce_level(level))

    if verbose:
        _enable_console_handler(logger)
    else:
        _disable_console_handler(logger)

    return logger, active_path


def _coerce_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def _ensure_file_handler(
    logger: logging.Logger,
    *,
    path: Path,
    filename: str,
    max_bytes: int,
    backup_count: int,
) -> tuple[RotatingFileHandler, Path]:
    for existing in logger.handlers:
        if getattr(existing, _FILE_MARKER, False):
            existing.baseFilename = str(path)  # type: ignore[attr-defined]
            return existing, path  # type: ignore[return-value]

    try:
        handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except PermissionError:
        fallback_dir = _prepare_log_dir(_fallback_log_dir())
        path = _prepare_log_file(fallback_dir, filename)
        handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    handler.setFormatter(JsonLogFormatter())
    setattr(handler, _FILE_MARKER, True)
    logger.addHandler(handler)
    return handler, path


def _enable_console_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_MARKER, False):
            handler.setLevel(logging.DEBUG)
            return
    console = logging.StreamHandler(stream=sys.stderr)
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    setattr(console, _CONSOLE_MARKER, True)
    logger.addHandler(console)


def _disable_console_handler(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def _coerce_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(key): _coerce_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_coerce_value(item) for item in value]
    return repr(value)


def _prepare_log_dir(log_dir: Path) -> Path:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        log_dir = _fallback_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _prepare_log_file(log_dir: Path, filename: str) -> Path:
    path = log_dir / filename
    try:
        path.touch(exist_ok=True)
    except PermissionError:  # pragma: no cover - depends on filesystem
        fallback = _fallback_log_dir()
        fallback.mkdir(parents=True, exist_ok=True)
        path = fallback / filename
        path.touch(exist_ok=True)
    try:
        path.chmod(0o600)
    except PermissionError:  # pragma: no cover - depends on filesystem
        pass
    return path


def _fallback_log_dir() -> Path:
    return Path(tempfile.gettempdir()) / "office-convert-logs"
