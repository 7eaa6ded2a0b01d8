import logging
import sys

LOGGER_NAME = "ethsig"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _make_handler(level):
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger():
    """
    Configure and return the package logger.

    Importing ethsig never touches logging configuration; an application
    that wants to see the parser's debug trail calls this (or get_logger)
    once, after choosing the verbosity with set_verbose_mode.

    Returns:
        logging.Logger: The "ethsig" logger with a single stream handler
    """
    logger = logging.getLogger(LOGGER_NAME)

    # change the log level no matter if it has been set up or not based on verbosity
    level = logging.DEBUG if verbose_mode else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        logger.addHandler(_make_handler(level))
    elif logger.handlers[0].level != level:
        # replace the handler configured for the previous verbosity
        logger.removeHandler(logger.handlers[0])
        logger.addHandler(_make_handler(level))

    return logger


# Global verbose flag that can be set by the embedding application
verbose_mode = False


def set_verbose_mode(verbose):
    """Set the global verbose mode flag."""
    global verbose_mode
    verbose_mode = bool(verbose)


def get_logger():
    """
    Get the package logger configured with the global verbose setting.

    Returns:
        logging.Logger: A configured logger instance
    """
    return setup_logger()
