"""
Structured logging for keypad decoding.

Every message may carry an ``op:<operation>`` tag followed by ``key:value``
pairs, so one PIN entry attempt can be followed through the log file. Timings
go to a separate ``performance.log``.
"""

import logging
import logging.handlers
import os
import time
import functools
from typing import Optional, Callable
from contextlib import contextmanager
from pathlib import Path

from .config_loader import ConfigLoader

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

_DETAILED_FORMAT = '%(asctime)s | %(name)s | %(levelname)8s | %(funcName)s:%(lineno)d | %(message)s'
_CONSOLE_FORMAT = '%(asctime)s | %(levelname)8s | %(message)s'


class PinpadLogger:
    """
    Logger for the keypad pipeline with structured context and timing.

    Handlers are attached once per logger name: console at INFO, a rotating
    ``pinpad_auto.log`` at DEBUG, and a rotating ``performance.log`` for
    timings. Setting ``logging.log_to_file`` to false keeps only the console.
    """

    def __init__(self, name: str = "pinpad_auto"):
        self.name = name
        self.logger = logging.getLogger(name)
        self.perf_logger = logging.getLogger(f"{name}.performance")
        self.perf_logger.propagate = False
        self._settings = ConfigLoader.get_section("logging")
        self._attach_handlers()

    def _attach_handlers(self):
        if self.logger.handlers:
            return

        self.logger.setLevel(self._get_log_level())

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt='%H:%M:%S'))
        self.logger.addHandler(console_handler)

        if not self._settings.get("log_to_file", True):
            self.perf_logger.addHandler(logging.NullHandler())
            return

        logs_dir = self._get_logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / "pinpad_auto.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_DETAILED_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        self.logger.addHandler(file_handler)

        if not self.perf_logger.handlers:
            perf_handler = logging.handlers.RotatingFileHandler(
                logs_dir / "performance.log",
                maxBytes=5*1024*1024,  # 5MB
                backupCount=3
            )
            perf_handler.setFormatter(logging.Formatter('%(asctime)s | %(message)s', datefmt='%H:%M:%S'))
            self.perf_logger.addHandler(perf_handler)
            self.perf_logger.setLevel(logging.INFO)

    def _get_logs_dir(self) -> Path:
        """Log directory from PINPAD_LOG_DIR, defaulting to ~/.pinpad_auto/logs."""
        override = os.environ.get('PINPAD_LOG_DIR')
        if override:
            return Path(override)
        return Path.home() / ".pinpad_auto" / "logs"

    def _get_log_level(self) -> int:
        """Get log level from PINPAD_LOG_LEVEL, then configuration, then INFO."""
        level_name = os.environ.get('PINPAD_LOG_LEVEL', self._settings.get("level", "INFO"))
        return _LEVELS.get(level_name.upper(), logging.INFO)

    def _format(self, message: str, operation: Optional[str], context: dict) -> str:
        suffix = self._build_context(operation, **context)
        return f"{message} | {suffix}" if suffix else message

    def debug(self, message: str, operation: str = None, **kwargs):
        self.logger.debug(self._format(message, operation, kwargs))

    def info(self, message: str, operation: str = None, **kwargs):
        self.logger.info(self._format(message, operation, kwargs))

    def warning(self, message: str, operation: str = None, **kwargs):
        self.logger.warning(self._format(message, operation, kwargs))

    def error(self, message: str, operation: str = None, exc_info: bool = True, **kwargs):
        self.logger.error(self._format(message, operation, kwargs), exc_info=exc_info)

    def _build_context(self, operation: str = None, **kwargs) -> str:
        """
        Render ``op:<operation> | key:value | ...``.

        Scalars, None and slot/digit lists are written in full; anything
        else (arrays, mappings) is elided as ``[...]``.
        """
        parts = [f"op:{operation}"] if operation else []
        for key, value in kwargs.items():
            if value is None or isinstance(value, (str, int, float, bool, list, tuple)):
                parts.append(f"{key}:{value}")
            else:
                parts.append(f"{key}:[...]")
        return " | ".join(parts)

    @contextmanager
    def performance_timer(self, operation: str, threshold_ms: float = 100.0):
        """
        Time the enclosed block into performance.log.

        A WARNING is logged when the block takes longer than `threshold_ms`.
        """
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.perf_logger.info(f"{operation} | {duration_ms:.2f}ms")
            if duration_ms > threshold_ms:
                self.warning(
                    "Slow operation detected",
                    operation=operation,
                    duration_ms=round(duration_ms, 2),
                    threshold_ms=threshold_ms
                )

    def log_match_result(self, slot: int, digit: Optional[int], distances=None, **kwargs):
        """Log the outcome of matching one observed keypad image."""
        log_kwargs = {"slot": slot, "digit": digit if digit is not None else "none"}
        if distances is not None:
            log_kwargs["distances"] = tuple(round(d, 2) for d in distances)

        self.debug("Keypad match", operation="match_slot", **log_kwargs, **kwargs)


_global_logger = None


def get_global_logger() -> PinpadLogger:
    """Get the package-wide logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = PinpadLogger()
    return _global_logger


def log_performance(operation: str, threshold_ms: float = 100.0):
    """Decorator timing each call of the wrapped function as `operation`."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with get_global_logger().performance_timer(operation, threshold_ms):
                return func(*args, **kwargs)

        return wrapper
    return decorator


def log_operation(operation: str = None):
    """
    Decorator logging start, success or failure, and duration of a call.

    Args:
        operation: Operation name (defaults to the function name)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_global_logger()
            op_name = operation or func.__name__

            logger.info("Starting operation", operation=op_name)
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Operation failed: {e}",
                    operation=op_name,
                    error_type=type(e).__name__,
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                )
                raise

            logger.info(
                "Operation completed successfully",
                operation=op_name,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            return result

        return wrapper
    return decorator


class LogContext:
    """
    Groups the log lines of one PIN entry attempt under a shared operation
    name and context.
    """

    def __init__(self, operation: str, logger: Optional[PinpadLogger] = None, **context):
        self.operation = operation
        self.logger = logger or get_global_logger()
        self.context = context
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.info("Entering operation context", operation=self.operation, **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

        if exc_type:
            self.logger.error(
                "Operation context exited with exception",
                operation=self.operation,
                exception=exc_type.__name__,
                duration_ms=duration_ms,
                exc_info=False,
                **self.context
            )
        else:
            self.logger.info(
                "Operation context completed",
                operation=self.operation,
                duration_ms=duration_ms,
                **self.context
            )

    def log_event(self, event: str, **kwargs):
        """Log an event within this context."""
        self.logger.info(f"Context event: {event}", operation=self.operation, **{**self.context, **kwargs})

    def log_debug(self, message: str, **kwargs):
        """Log debug message within this context."""
        self.logger.debug(message, operation=self.operation, **{**self.context, **kwargs})


def setup_global_logging(log_level: str = "INFO"):
    """Set the level of the package logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
    logger = get_global_logger()
    logger.logger.setLevel(_LEVELS.get(log_level.upper(), logging.INFO))
    logger.info(f"Global logging configured with level {log_level}")
