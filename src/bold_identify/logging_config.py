"""Logging configuration and utilities."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if enabled."""
        levelname = record.levelname

        if self.use_colors and levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        result = super().format(record)

        # Handlers share the record
        record.levelname = levelname

        return result


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    colors: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    quiet: bool = False
) -> Dict[str, logging.Logger]:
    """
    Setup logging for command-line use.

    Library callers should configure logging themselves; nothing here runs
    on import.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating log file
        console: Enable console output on stderr
        colors: Enable colored console output
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup files to keep
        quiet: Suppress all but error logs to console

    Returns:
        Dictionary of configured loggers
    """
    level = getattr(logging, log_level.upper())

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = ColoredFormatter(
        '%(levelname)s - %(message)s',
        use_colors=colors
    )

    package_logger = logging.getLogger('bold_identify')
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.DEBUG)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        package_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.ERROR if quiet else level)
        console_handler.setFormatter(console_formatter)
        package_logger.addHandler(console_handler)

    loggers = {
        'main': package_logger,
        'client': logging.getLogger('bold_identify.client'),
        'parser': logging.getLogger('bold_identify.parser'),
        'api': logging.getLogger('bold_identify.api'),
        'performance': logging.getLogger('bold_identify.performance')
    }

    loggers['main'].debug(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return loggers


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"bold_identify.{name}")


def short_sequence(sequence: Optional[str], length: int = 20) -> str:
    """Abbreviate a sequence for log messages."""
    if not sequence:
        return "<empty>"
    if len(sequence) <= length:
        return sequence
    return f"{sequence[:length]}...({len(sequence)}bp)"


def log_api_call(api_name: str, endpoint: str, params: Dict[str, Any], response_time: float, success: bool):
    """Log API call details."""
    logger = logging.getLogger('bold_identify.api')

    shown = dict(params)
    if 'sequence' in shown:
        shown['sequence'] = short_sequence(shown['sequence'])

    if success:
        logger.debug(
            f"API call: {api_name} - {endpoint} "
            f"(params: {shown}, response_time: {response_time:.2f}s)"
        )
    else:
        logger.error(
            f"API call failed: {api_name} - {endpoint} "
            f"(params: {shown}, response_time: {response_time:.2f}s)"
        )


class LogTimer:
    """Context manager for timing operations."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        """
        Initialize timer.

        Args:
            operation: Operation description
            logger: Logger to use (defaults to performance logger)
        """
        self.operation = operation
        self.logger = logger or logging.getLogger('bold_identify.performance')
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time:
            self.elapsed = (datetime.now() - self.start_time).total_seconds()
            if exc_type is None:
                self.logger.debug(f"{self.operation} completed in {self.elapsed:.2f}s")
            else:
                self.logger.error(f"{self.operation} failed after {self.elapsed:.2f}s")
