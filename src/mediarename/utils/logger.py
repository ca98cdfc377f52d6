"""
Structured single-line event logging.

Every line reads `timestamp | [LEVEL] | event | key="value" | ...` with a UTC
timestamp, so identification decisions (retries, reverted cleanups, failed
lookups) can be grepped and parsed afterwards. Console output goes through
`tqdm.write` to keep progress bars intact; `set_log_file` mirrors the same
lines into a file.
"""
import threading
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from tqdm import tqdm

_SEPARATOR = " | "
_lock = threading.Lock()


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


class _Sink:
    level = LogLevel.INFO
    mirror: Optional[TextIO] = None

    def emit(self, line: str) -> None:
        tqdm.write(line)
        if self.mirror is not None:
            self.mirror.write(line + "\n")


_sink = _Sink()


def set_log_level(level: LogLevel) -> None:
    _sink.level = level


def get_log_level() -> LogLevel:
    return _sink.level


def set_log_file(path: Optional[Path]) -> None:
    """
    Mirror every emitted line into `path` (appending).

    Passing None closes a previously opened log file and stops mirroring.
    """
    with _lock:
        if _sink.mirror is not None:
            _sink.mirror.close()
            _sink.mirror = None
        if path is not None:
            path = Path(path).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            _sink.mirror = open(path, "a", encoding="utf-8", buffering=1)


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        # One event per line, whatever the filename contains
        escaped = value.replace("\r", "\\r").replace("\n", "\\n").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def _format_kv(data: Dict[str, Any]) -> str:
    return _SEPARATOR.join(f"{key}={_format_value(value)}" for key, value in data.items())


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Emit one structured event.

    Args:
        event: Dotted event name, e.g. 'identify.retry_parent' or 'rename.execute'
        level: Events below the current level are dropped
        **kwargs: Fields appended as key=value pairs, in the given order
    """
    if level.value < _sink.level.value:
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    parts = [timestamp, f"[{level.name}]", event]
    if kwargs:
        parts.append(_format_kv(kwargs))
    with _lock:
        _sink.emit(_SEPARATOR.join(parts))


def safe_print(*args, **kwargs) -> None:
    """Thread-safe print for user-facing output; diagnostics belong in log()."""
    with _lock:
        print(*args, **kwargs, flush=True)
