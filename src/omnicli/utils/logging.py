"""
Logging setup for OmniCLI.

The engine is embedded in a host application, so nothing here runs on import.
Modules grab their logger with ``get_logger(__name__)``; a host that wants
console or file output calls ``setup_logging(config)`` once.
"""

import os
import sys
import json
import time
import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Optional, Callable
from functools import wraps
from contextlib import contextmanager
from datetime import datetime


class Colors:
    """ANSI color codes for console output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that adds colors to console output based on log level."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.BRIGHT_BLUE,
        'WARNING': Colors.BRIGHT_YELLOW,
        'ERROR': Colors.BRIGHT_RED,
        'CRITICAL': Colors.BRIGHT_MAGENTA + Colors.BOLD,
    }

    def __init__(self, use_colors=True):
        """Initialize the formatter.

        Args:
            use_colors: Whether to use colors in output
        """
        self.use_colors = use_colors and self._supports_color()

        fmt = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    def _supports_color(self):
        """Check if the terminal supports color output."""
        if not hasattr(sys.stderr, 'isatty') or not sys.stderr.isatty():
            return False

        if os.getenv('NO_COLOR'):
            return False

        if os.getenv('FORCE_COLOR'):
            return True

        term = os.getenv('TERM', '').lower()
        return 'color' in term or term in ('xterm', 'xterm-256color', 'screen', 'linux')

    def format(self, record):
        formatted = super().format(record)

        if not self.use_colors:
            return formatted

        color = self.LEVEL_COLORS.get(record.levelname, '')
        if color:
            formatted = f"{color}{formatted}{Colors.RESET}"

        return formatted


class JSONFileFormatter(logging.Formatter):
    """Formatter that outputs structured JSON logs for file storage."""

    _RESERVED = {
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
        'filename', 'module', 'exc_info', 'exc_text', 'stack_info',
        'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
        'thread', 'threadName', 'processName', 'process', 'message',
        'taskName',
    }

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.name,
            'message': record.getMessage(),
            'extra': {
                'filename': record.filename,
                'lineno': record.lineno,
                'funcName': record.funcName,
            }
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        # Anything passed through ``extra=`` on the logging call
        for key, value in record.__dict__.items():
            if key not in self._RESERVED:
                log_entry['extra'][key] = value

        return json.dumps(log_entry, default=str)


class PerformanceTimer:
    """Context manager for timing an operation and logging the result."""

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.DEBUG):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        duration = self.end_time - self.start_time

        if exc_type is None:
            self.logger.log(self.level, f"Completed {self.operation} in {duration:.3f}s")
        else:
            self.logger.log(self.level, f"Failed {self.operation} after {duration:.3f}s")

    @property
    def duration(self) -> Optional[float]:
        """Get the duration if timing is complete."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return None


def performance_timer(operation: str = None, level: int = logging.DEBUG):
    """Decorator for timing function execution.

    Args:
        operation: Description of the operation (defaults to function name)
        level: Log level to use for timing messages
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            op_name = operation or f"{func.__name__}()"

            with PerformanceTimer(logger, op_name, level):
                return func(*args, **kwargs)

        return wrapper
    return decorator


class LoggingManager:
    """Central logging manager for OmniCLI."""

    ROOT_LOGGER = "omnicli"

    def __init__(self):
        self._initialized = False
        self._loggers: Dict[str, logging.Logger] = {}
        self._log_file: Optional[Path] = None

    def setup_logging(self, config, verbose: bool = False, force_reinit: bool = False):
        """Setup logging based on configuration.

        Only the ``omnicli`` logger hierarchy is touched so the host's own
        logging setup is left alone.

        Args:
            config: OmniCLIConfig instance
            verbose: Enable verbose logging (overrides config)
            force_reinit: Force reinitialization even if already setup
        """
        if self._initialized and not force_reinit:
            return

        if verbose or config.app.verbose_logging:
            log_level = logging.DEBUG
        else:
            log_level = getattr(logging, config.app.log_level.value.upper(), logging.INFO)

        package_logger = logging.getLogger(self.ROOT_LOGGER)
        package_logger.setLevel(log_level)
        package_logger.propagate = False

        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)

        self._setup_console_handler(package_logger, log_level)

        if config.app.log_file:
            self._setup_file_handler(package_logger, config, log_level)

        self._initialized = True

        logger = self.get_logger('omnicli.logging')
        logger.debug("Logging system initialized")
        logger.debug(f"Log level: {logging.getLevelName(log_level)}")
        if self._log_file:
            logger.debug(f"Log file: {self._log_file}")

    def _setup_console_handler(self, package_logger: logging.Logger, log_level: int):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ColoredConsoleFormatter(use_colors=True))
        package_logger.addHandler(console_handler)

    def _setup_file_handler(self, package_logger: logging.Logger, config, log_level: int):
        """Setup file logging handler with rotation."""
        try:
            log_file = Path(config.app.log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=config.app.max_log_size_mb * 1024 * 1024,
                backupCount=config.app.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(JSONFileFormatter())

            package_logger.addHandler(file_handler)
            self._log_file = log_file

        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance for the given name.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Logger instance
        """
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)

        return self._loggers[name]

    def create_performance_timer(self, operation: str, level: int = logging.DEBUG) -> PerformanceTimer:
        logger = self.get_logger('omnicli.performance')
        return PerformanceTimer(logger, operation, level)

    def is_initialized(self) -> bool:
        return self._initialized


_logging_manager = LoggingManager()


def setup_logging(config, verbose: bool = False, force_reinit: bool = False):
    """Setup logging based on configuration.

    Args:
        config: OmniCLIConfig instance
        verbose: Enable verbose logging
        force_reinit: Force reinitialization
    """
    _logging_manager.setup_logging(config, verbose, force_reinit)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return _logging_manager.get_logger(name)


@contextmanager
def log_performance(operation: str, level: int = logging.DEBUG):
    """Context manager for performance timing.

    Args:
        operation: Description of the operation being timed
        level: Log level to use for timing messages

    Yields:
        PerformanceTimer instance
    """
    timer = _logging_manager.create_performance_timer(operation, level)
    with timer:
        yield timer


def is_logging_initialized() -> bool:
    """Check if logging has been initialized."""
    return _logging_manager.is_initialized()
