"""
Structured Logging for the Advisor Backend

Console logging with:
- Color-coded levels (only when stdout is a terminal)
- Per-component icons for the advisor modules
- Section banners for startup
- Request/response and per-turn summaries
"""

import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta

    SECTION = '\033[94m'    # Bright Blue
    KEY = '\033[93m'        # Bright Yellow
    TIMESTAMP = '\033[90m'  # Dark Gray


LEVEL_COLORS = {
    'DEBUG': Colors.DEBUG,
    'INFO': Colors.INFO,
    'WARNING': Colors.WARNING,
    'ERROR': Colors.ERROR,
    'CRITICAL': Colors.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
    """Formatter with timestamp, component icon, colored level and logger name."""

    LEVEL_ICONS = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️',
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '🚨',
    }

    # Keyed on the last dotted part of the logger name.
    COMPONENT_ICONS = {
        'main': '🌐',
        'course_advisor': '🎓',
        'state_machine': '🔀',
        'session_manager': '💾',
        'recommendation_engine': '🧭',
        'profile_extractor': '🧩',
        'intent_classifier': '🎯',
        'prose_generator': '🤖',
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def format(self, record: logging.LogRecord) -> str:
        component = record.name.split('.')[-1]
        icon = self.COMPONENT_ICONS.get(component, self.LEVEL_ICONS.get(record.levelname, '•'))
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]
        level = self._paint(LEVEL_COLORS.get(record.levelname, Colors.RESET), f"{record.levelname:8s}")

        formatted = (
            f"{self._paint(Colors.TIMESTAMP, f'[{timestamp}]')} {icon} {level} "
            f"{self._paint(Colors.BOLD, record.name)} | {record.getMessage()}"
        )
        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"
        return formatted


def format_fields(data: Dict[str, Any], indent: int = 2) -> str:
    """Render a flat/nested dict as indented `key: value` lines."""
    lines = []
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{' ' * indent}{key}:")
            lines.append(format_fields(value, indent + 2))
        elif isinstance(value, list) and len(value) > 5:
            lines.append(f"{' ' * indent}{key}: {value[:3]} ... ({len(value)} items total)")
        else:
            lines.append(f"{' ' * indent}{key}: {value}")
    return "\n".join(lines)


class StructuredLogger:
    """Logger wrapper that appends an optional field block to each message."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger or logging.getLogger(name)

    def _with_data(self, message: str, data: Optional[Dict[str, Any]]) -> str:
        return f"{message}\n{format_fields(data)}" if data else message

    def section(self, title: str, data: Optional[Dict[str, Any]] = None):
        """Log a banner (used once at startup)."""
        separator = "=" * 80
        body = f"\n{separator}\n📋 {title.upper()}"
        if data:
            body += f"\n{format_fields(data)}"
        self.logger.info(f"{body}\n{separator}")

    def debug(self, message: str, data: Optional[Dict[str, Any]] = None):
        self.logger.debug(self._with_data(message, data))

    def info(self, message: str, data: Optional[Dict[str, Any]] = None):
        self.logger.info(self._with_data(message, data))

    def warning(self, message: str, data: Optional[Dict[str, Any]] = None):
        self.logger.warning(self._with_data(message, data))

    def error(self, message: str, error: Optional[Exception] = None, data: Optional[Dict[str, Any]] = None):
        """Log an error, with traceback when an exception is given."""
        if error:
            message = f"{message} Error: {type(error).__name__}: {error}"
        self.logger.error(self._with_data(message, data), exc_info=error)

    def success(self, message: str, data: Optional[Dict[str, Any]] = None):
        self.logger.info(self._with_data(f"✅ {message}", data))

    def request(self, method: str, path: str, session_id: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        fields = {"session": session_id[:8] if session_id else None}
        if data:
            fields.update(data)
        self.logger.info(self._with_data(f"📥 REQUEST: {method} {path}", fields))

    def response(self, status: int, path: str, duration: Optional[float] = None, data: Optional[Dict[str, Any]] = None):
        fields = {"duration_ms": f"{duration * 1000:.2f}" if duration is not None else None}
        if data:
            fields.update(data)
        self.logger.info(self._with_data(f"📤 RESPONSE: {status} {path}", fields))


def setup_logging(level: int = logging.INFO, use_colors: bool = True):
    """Install the colored console handler on the root logger."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Suppress noisy loggers
    for noisy in ('asyncio', 'httpx', 'httpcore', 'urllib3', 'openai'):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name, logging.getLogger(name))
