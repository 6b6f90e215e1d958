import os
import re
import signal
import logging
import queue
import threading
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from typing import Optional

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseThreadFormatter(logging.Formatter):
    """
    Base formatter that records which thread emitted a record. Records are
    formatted on the listener thread, so the emitting thread is captured from
    the record rather than from the current thread.
    """

    _base_format = "%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(funcName)s() - %(message)s"

    def __init__(self, fmt=None):
        super().__init__(fmt or self._base_format)

    def format(self, record):
        try:
            return super().format(record)
        except (KeyError, ValueError) as e:
            match = re.search(r"'([^']+)'", str(e))
            if not match:
                raise
            setattr(record, match.group(1), "unknown")
            return super().format(record)


class StandardFormatter(BaseThreadFormatter):
    """Plain formatter used for files and non-tty consoles."""


class ColoredFormatter(BaseThreadFormatter):
    """A colored formatter that applies different colors based on log level"""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    def __init__(self):
        super().__init__(None)
        colors = {
            logging.DEBUG: self.grey,
            logging.INFO: self.grey,
            logging.WARNING: self.yellow,
            logging.ERROR: self.red,
            logging.CRITICAL: self.bold_red,
        }
        self._formatters = {
            level: BaseThreadFormatter(f"{color}{self._base_format}{self.reset}")
            for level, color in colors.items()
        }

    def format(self, record):
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


class ThreadLogger:
    """
    A named logger whose records are handed to a background QueueListener, so
    emitting a record never blocks a reaction on handler I/O.
    """

    def __init__(self, *, name: str, signal_level: str = "INFO"):
        self.name = name
        self.log_queue: queue.Queue = queue.Queue(-1)
        self.handlers: list[logging.Handler] = []
        self.listener: Optional[QueueListener] = None
        self._lock = threading.Lock()

        if signal_level.upper() not in VALID_LEVELS:
            raise ValueError(f"Invalid log level '{signal_level}'. Allowed: {', '.join(VALID_LEVELS)}")
        self.signal_level = getattr(logging, signal_level.upper())

        self._setup()

    def _setup(self):
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG)

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        self.logger.addHandler(QueueHandler(self.log_queue))
        self.logger.debug("Logger initialized - use add_handler() to add output handlers")

    def add_handler(self, handler: logging.Handler):
        """Add a handler to the logger"""
        with self._lock:
            self.handlers.append(handler)
            self._restart_listener()
        self.logger.debug(f"Handler added: {type(handler).__name__}")

    def remove_handler(self, handler: logging.Handler):
        """Remove a handler from the logger"""
        with self._lock:
            if handler not in self.handlers:
                return
            self.handlers.remove(handler)
            self._restart_listener()
        self.logger.debug(f"Handler removed: {type(handler).__name__}")

    def _restart_listener(self):
        if self.listener:
            self.listener.stop()

        if self.handlers:
            self.listener = QueueListener(self.log_queue, *self.handlers, respect_handler_level=True)
            self.listener.start()
        else:
            self.listener = None

    def setup_signal_handlers(self):
        """SIGUSR1 raises verbosity, SIGUSR2 lowers it"""
        if not (hasattr(signal, "SIGUSR1") and hasattr(signal, "SIGUSR2")):
            self.logger.warning("Platform does not support SIGUSR1/SIGUSR2 signals")
            return
        signal.signal(signal.SIGUSR1, self._handle_sigusr1)
        signal.signal(signal.SIGUSR2, self._handle_sigusr2)
        self.logger.info(f"Signal handlers registered, increase verbosity: kill -SIGUSR1 {os.getpid()}")
        self.logger.info(f"Decrease verbosity: kill -SIGUSR2 {os.getpid()}")

    def _handle_sigusr1(self, signum, frame):
        if self.signal_level > logging.DEBUG:
            self.set_all_handler_levels(self.signal_level - 10)
        else:
            self.logger.critical("Already at maximum verbosity (DEBUG level)")

    def _handle_sigusr2(self, signum, frame):
        if self.signal_level < logging.CRITICAL:
            self.set_all_handler_levels(self.signal_level + 10)
        else:
            self.logger.critical("Already at minimum verbosity (CRITICAL level)")

    def set_all_handler_levels(self, level):
        """Set the log level of every handler"""
        if isinstance(level, str):
            if level.upper() not in VALID_LEVELS:
                raise ValueError(f"Invalid log level '{level}'")
            level = getattr(logging, level.upper())

        self.signal_level = level
        for handler in self.handlers:
            handler.setLevel(level)
        self.logger.info(f"All handlers set to level {logging.getLevelName(level)}")

    def get_logger(self) -> logging.Logger:
        return self.logger

    def shutdown(self) -> bool:
        """Flush pending records, stop the listener thread and close the handlers"""
        self.logger.debug("Shutting down logger")
        with self._lock:
            stopped = False
            if self.listener:
                self.listener.stop()
                self.listener = None
                stopped = True
            for handler in self.handlers:
                handler.close()
        return stopped


def create_console_handler(*, level=logging.INFO, colored: bool = True):
    """Create a console handler with optional coloring"""
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter() if colored else StandardFormatter())
    return handler


def create_file_handler(
    *,
    log_file: str,
    level=logging.DEBUG,
    rotate: bool = True,
    when: str = "midnight",
    interval: int = 1,
    backup_count: int = 10,
):
    """Create a file handler with optional rotation"""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    if rotate:
        handler = TimedRotatingFileHandler(log_file, when=when, interval=interval, backupCount=backup_count)
        handler.suffix = "%Y-%m-%d_%H-%M-%S.log"
    else:
        handler = logging.FileHandler(log_file)

    handler.setLevel(level)
    handler.setFormatter(StandardFormatter())
    return handler
