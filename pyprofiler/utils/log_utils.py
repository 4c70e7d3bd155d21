import logging
from logging.handlers import TimedRotatingFileHandler
import os
import sys
from datetime import datetime


class MicrosecondFormatter(logging.Formatter):
    
    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        if datefmt:
            return ct.strftime(datefmt)
        return super().formatTime(record, datefmt)


def init_logger(
    name: str = "", 
    log_file: str | None = "logs/profiler.log",
    level: int | str = logging.INFO,
    console: bool = True
) -> logging.Logger:
    """
    Initialize a logger that logs to a file and/or the console.

    Parameters
    ----------
    name : str
        Name of the logger (empty string refers to the root logger).
    log_file : str | None
        Path to the log file. Parent directories will be created if needed.
        If None, nothing is logged to file.
    level : int | str
        Logging level (e.g., logging.INFO or "DEBUG").
    console : bool
        If True, log to sys.stderr. Standard output is kept free for the
        generated profile.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        formatter = MicrosecondFormatter(
            fmt="%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S.%f"
        )

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                log_file, when="midnight", backupCount=7, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        
        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    return logger
