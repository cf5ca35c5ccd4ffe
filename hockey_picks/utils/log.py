"""
Console logging for scraper runs.

Progress goes to stdout, warnings and errors to stderr. Debug lines
(one per fetched page) only show in verbose mode.
"""

import sys
import re
from typing import Optional
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels for filtering output."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


# Module-level configuration
_log_level = LogLevel.INFO
_use_emoji = True

_COLORS = {
    'reset': '\033[0m',
    'red': '\033[91m',
    'yellow': '\033[93m',
    'green': '\033[92m',
    'gray': '\033[90m',
}

_EMOJI_RE = re.compile(
    "["
    "\U0001F300-\U0001F6FF"  # symbols, pictographs, transport
    "\U0001F900-\U0001F9FF"  # supplemental symbols
    "\U00002600-\U000027BF"  # misc symbols, dingbats
    "]+",
    flags=re.UNICODE
)


def set_verbosity(verbose: bool) -> None:
    """Show DEBUG messages when verbose, INFO and above otherwise."""
    global _log_level
    _log_level = LogLevel.DEBUG if verbose else LogLevel.INFO


def set_use_emoji(use_emoji: bool) -> None:
    """Enable or disable emoji in output."""
    global _use_emoji
    _use_emoji = use_emoji


def _supports_color(stream) -> bool:
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    return sys.platform != 'win32'


def _colorize(text: str, color: str, stream) -> str:
    if _supports_color(stream) and color in _COLORS:
        return f"{_COLORS[color]}{text}{_COLORS['reset']}"
    return text


def _strip_emoji(msg: str) -> str:
    if _use_emoji:
        return msg
    return _EMOJI_RE.sub('', msg).strip()


def _format_message(msg: str, level: str, color: Optional[str], stream) -> str:
    level_str = f"[{level}]"
    if color:
        level_str = _colorize(level_str, color, stream)
    return f"{level_str} {_strip_emoji(msg)}"


def debug(msg: str) -> None:
    """Print debug message (only in verbose mode)."""
    if _log_level <= LogLevel.DEBUG:
        print(_format_message(msg, 'DEBUG', 'gray', sys.stdout))


def info(msg: str) -> None:
    """Print info message."""
    if _log_level <= LogLevel.INFO:
        print(_strip_emoji(msg))


def warn(msg: str) -> None:
    """Print warning message."""
    if _log_level <= LogLevel.WARN:
        print(_format_message(msg, 'WARN', 'yellow', sys.stderr), file=sys.stderr)


def error(msg: str) -> None:
    """Print error message."""
    if _log_level <= LogLevel.ERROR:
        print(_format_message(msg, 'ERROR', 'red', sys.stderr), file=sys.stderr)


def success(msg: str) -> None:
    """Print success message (always shown)."""
    print(_colorize(_strip_emoji(msg), 'green', sys.stdout))
