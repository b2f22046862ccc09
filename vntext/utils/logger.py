"""
Logger utility for vntext with colorful console output and file logging.
"""

import atexit
import logging
from termcolor import colored
from datetime import datetime
import functools
import sys
import os


LOG_COLORS = {
    logging.DEBUG: "blue",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ColorfulFormatter(logging.Formatter):

    def formatMessage(self, record):
        created_time = datetime.fromtimestamp(record.created)
        asctime = created_time.strftime(self.datefmt)
        log = self._fmt % {"asctime": asctime, "levelname": record.levelname, "message": record.message}

        color = LOG_COLORS.get(record.levelno)
        if color:
            log = colored(log, color)

        return log


@functools.lru_cache()  # Cache to prevent multiple handlers
def setup_logger(output=None, *, level="INFO", color=True, name="vntext"):
    """
    Initialize the vntext logger.

    Modules of the package log to children of this logger ("vntext.phonology.syllable"...),
    so their records go through the handlers set here.

    Args:
        output (str, optional): A file name or a directory to save log. If None, will not save log file.
            If ends with ".txt" or ".log", assumed to be a file name.
            Otherwise, logs will be saved to `output/log.txt`.
        level (str): Verbosity level of the logger: DEBUG, INFO, WARNING or ERROR.
        color (bool): Whether to use colors in console output.
        name (str): The root module name of this logger.

    Returns:
        logging.Logger: A configured logger instance.

    Example:
        >>> logger = setup_logger(output="logs/normalize.log", level="DEBUG")
        >>> logger.info("Normalizing corpus...")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
    DATEFMT = "%d/%m/%Y %H:%M:%S"
    plain_formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    # Console logging goes to stderr, stdout carries the results
    ch = logging.StreamHandler(stream=sys.stderr)
    ch.setLevel(level)
    if color:
        formatter = ColorfulFormatter(fmt=FORMAT, datefmt=DATEFMT)
    else:
        formatter = plain_formatter
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # file logging
    if output is not None:
        if output.endswith(".txt") or output.endswith(".log"):
            filename = output
        else:
            filename = os.path.join(output, "log.txt")

        dirname = os.path.dirname(filename)
        if dirname and not os.path.exists(dirname):
            os.makedirs(dirname, exist_ok=True)

        fh = logging.StreamHandler(_cached_log_stream(filename))
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(plain_formatter)
        logger.addHandler(fh)

    return logger


@functools.lru_cache(maxsize=None)
def _cached_log_stream(filename):
    """
    Cache the opened file object, so that different calls to `setup_logger`
    with the same file name can safely write to the same file.

    Args:
        filename (str): Path to log file

    Returns:
        file: Opened file stream
    """
    io = open(filename, "a", encoding="utf-8")
    atexit.register(io.close)
    return io
