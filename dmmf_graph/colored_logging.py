"""
Colored console logging for the DMMF graph builder.

Log levels and a few message shapes (progress, success, section headers) get
ANSI colors when stderr is a terminal.
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Logging formatter that wraps records in ANSI color codes."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SPECIAL_COLORS = {
        'success': '\033[92m',    # Bright Green
        'progress': '\033[94m',   # Bright Blue
        'section': '\033[96m',    # Bright Cyan
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    SUCCESS_PREFIX = "✓ "
    PROGRESS_PREFIX = "→ "

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        """
        Args:
            fmt: Log format string (uses default if None)
            use_colors: Whether to use colors; ignored when stderr is not a TTY
        """
        if fmt is None:
            fmt = "%(levelname)s: %(message)s"
        super().__init__(fmt)

        self.use_colors = use_colors and hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if not self.use_colors:
            return formatted_message

        color = self._pick_color(record)
        if not color:
            return formatted_message
        return f"{color}{formatted_message}{self.RESET}"

    def _pick_color(self, record: logging.LogRecord) -> str:
        if record.levelname in ('ERROR', 'CRITICAL', 'WARNING'):
            return self.COLORS[record.levelname]

        message = record.getMessage()
        if message.startswith(self.SUCCESS_PREFIX):
            return f"{self.SPECIAL_COLORS['success']}{self.BOLD}"
        if message.startswith(self.PROGRESS_PREFIX):
            return self.SPECIAL_COLORS['progress']
        if self._is_section_message(message):
            return f"{self.BOLD}{self.SPECIAL_COLORS['section']}"
        if record.levelname == 'DEBUG':
            return self.COLORS['DEBUG']
        return ""

    def _is_section_message(self, message: str) -> bool:
        """Check if message is a section header."""
        return '=' in message and len(message.strip()) > 20


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Install a colored console handler on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate output.
    """
    formatter = ColoredFormatter(use_colors=use_colors)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def log_success(logger: logging.Logger, message: str) -> None:
    """Log a success message with special formatting."""
    logger.info(f"{ColoredFormatter.SUCCESS_PREFIX}{message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    """Log a progress message with special formatting."""
    logger.info(f"{ColoredFormatter.PROGRESS_PREFIX}{message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header with special formatting."""
    separator = "=" * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
