# logger_utils.py - logging setup plus performance metrics and timing helpers

import logging
import time
from typing import Optional

from rich.logging import RichHandler

LOGGER_NAME = "trie_autocorrect"
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Log:
    """Front door for project logging: one-time setup, metrics, timed blocks."""

    @staticmethod
    def setup(level: str = "INFO", path: Optional[str] = None, console: bool = True) -> logging.Logger:
        """
        Configure the package logger.
        Console output goes through rich; `path` adds a plain-text log file
        with entries written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Calling it again replaces the previous handlers.
        """
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(level.upper())
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        if console:
            logger.addHandler(RichHandler(show_path=False, markup=False))
        if path:
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
            logger.addHandler(fh)
        logger.propagate = False
        return logger

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts, throughput) at INFO level.
        Example: benchmark done: 12.345ms
        """
        logging.getLogger(f"{LOGGER_NAME}.metrics").info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Measure how long a block takes and log it as a metric.
            with Log.time_block("load") as t:
                do_some_work()
            t.elapsed_ms
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to time a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed_ms = (time.perf_counter() - self.start) * 1000.0
        Log.metric(f"{self.label} done", round(self.elapsed_ms, 3), "ms")
        return False
