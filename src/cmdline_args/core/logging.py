"""Logging helpers for cmdline-args.

Library modules only create loggers; handlers are installed by
setup_logging, which the command-line tool calls once at startup.
"""

import atexit
import contextlib
import json
import logging
import os
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from cmdline_args.core.config import LogConfig
from cmdline_args.core.constants import LOG_LEVEL_ENV_VAR, VALID_LOG_LEVELS

_LOG_RECORD_RESERVED_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime", "extra_fields"}
_REDACTED_VALUE = "[REDACTED]"
_REDACTION_FLAG_ATTR = "_cmdline_args_redacted"
_REDACTION_MARKER = object()
_SENSITIVE_FIELD_NAMES = {
    "password",
    "passwd",
    "pwd",
    "secret",
    "client_secret",
    "token",
    "access_token",
    "api_key",
    "apikey",
    "private_key",
}
_SENSITIVE_KEY_REGEX = (
    r"client[_-]?secret|access[_-]?token|api[_-]?key|apikey|private[_-]?key|password|passwd|pwd|secret|token"
)
# Matches "--password=hunter2", "-p token=abc", "api_key: 'xyz'" and similar fragments
_SENSITIVE_KEY_VALUE_PATTERN = re.compile(
    rf"""(?ix)
    (?P<full_key>(?<![A-Za-z0-9_])(?:{_SENSITIVE_KEY_REGEX})(?![A-Za-z0-9_]))
    (?P<separator>\s*[:=]\s*)
    (?!\[REDACTED\])
    (?P<value>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^,\s;}}\]'"]+)
    """
)


def _normalize_field_name(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.strip().lower()).strip("_")


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # Keep logging resilient when message formatting fails (bad placeholders or broken __str__).
        return f"{record.msg!s} [log-message-format-error]"


def _is_record_redacted(record: logging.LogRecord) -> bool:
    return record.__dict__.get(_REDACTION_FLAG_ATTR) is _REDACTION_MARKER


def _mark_record_redacted(record: logging.LogRecord) -> None:
    record.__dict__[_REDACTION_FLAG_ATTR] = _REDACTION_MARKER


def _is_sensitive_field(name: str) -> bool:
    normalized = _normalize_field_name(name)
    if normalized in _SENSITIVE_FIELD_NAMES:
        return True
    parts = [part for part in normalized.split("_") if part]
    if "password" in parts or "secret" in parts or "token" in parts:
        return True
    return parts[-2:] == ["api", "key"] or parts[-2:] == ["private", "key"]


def _redact_key_value_match(match: re.Match[str]) -> str:
    value = match.group("value")
    if len(value) >= 2 and value[0] in {"'", '"'} and value[-1] == value[0]:
        redacted = f"{value[0]}{_REDACTED_VALUE}{value[0]}"
    else:
        redacted = _REDACTED_VALUE
    return f"{match.group('full_key')}{match.group('separator')}{redacted}"


def redact_message(message: str) -> str:
    """Replace values of sensitive-looking keys in a free-form message."""
    return _SENSITIVE_KEY_VALUE_PATTERN.sub(_redact_key_value_match, message)


def _redact_value(value: object) -> object:
    if isinstance(value, dict):
        return {
            key: _REDACTED_VALUE if _is_sensitive_field(str(key)) else _redact_value(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_redact_value(item) for item in value)
    if isinstance(value, str):
        return redact_message(value)
    return value


class SensitiveDataFilter(logging.Filter):
    """Best-effort redaction of secrets passed as option values.

    Debug logs echo raw tokens, so "--password=hunter2" would otherwise end
    up in log files verbatim.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_record_redacted(record):
            return True

        record.msg = redact_message(_safe_record_message(record))
        record.args = ()

        for key, value in list(record.__dict__.items()):
            if key in _LOG_RECORD_RESERVED_FIELDS or key.startswith("_"):
                continue
            if _is_sensitive_field(key):
                record.__dict__[key] = _REDACTED_VALUE
                continue
            with contextlib.suppress(Exception):
                record.__dict__[key] = _redact_value(value)

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            record.extra_fields = _redact_value(extra_fields)
        _mark_record_redacted(record)
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        already_redacted = _is_record_redacted(record)
        message = _safe_record_message(record)
        if not already_redacted:
            message = redact_message(message)

        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {}
        record_extra_fields = getattr(record, "extra_fields", None)
        if isinstance(record_extra_fields, dict):
            extra_fields.update(record_extra_fields)

        # Custom LogRecord attributes set via logging's `extra`
        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_RESERVED_FIELDS or key.startswith("_"):
                continue
            extra_fields.setdefault(key, value)

        if extra_fields:
            log_entry.update(extra_fields if already_redacted else _redact_value(extra_fields))

        return json.dumps(log_entry, default=str)


_atexit_registered = False


def resolve_log_level(log_level: str | None = None) -> int:
    """Return the numeric level: parameter > CMDLINE_ARGS_LOG_LEVEL > INFO."""
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")

    if log_level.upper() not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using INFO", file=sys.stderr)
        log_level = "INFO"

    return getattr(logging, log_level.upper(), logging.INFO)


def setup_logging(
    log_level: str | None = None, log_format: str = "text", log_file: str | None = None
) -> logging.Logger:
    """Setup logging to stderr and, optionally, a rotating log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - "text" (default) or "json" for structured logging
        log_file: Path of a log file to write alongside stderr

    Returns:
        Configured package logger

    stdout is left alone because the command-line tool prints parse results there.
    """
    global _atexit_registered

    config = LogConfig(format=log_format, file=log_file).validate()

    if not _atexit_registered:
        atexit.register(logging.shutdown)
        _atexit_registered = True

    numeric_level = resolve_log_level(log_level)

    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file is not None:
        log_path = Path(config.file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    log_path, maxBytes=config.file_max_bytes, backupCount=config.file_backup_count
                )
            )
        except OSError as e:
            print(f"Warning: Cannot open log file {log_path}: {e}. Logging to console only.", file=sys.stderr)

    if config.format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_level)
        handler.addFilter(SensitiveDataFilter())
        logging.root.addHandler(handler)

    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("cmdline_args")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)}")
    return logger
