import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler = None


def setup_logger(verbose: bool = False) -> logging.Logger:
    """
    Configures the root logger for the application.

    Logs go to stderr, stdout is reserved for the CSV. Without verbose only
    critical records reach the console.
    """
    global _handler
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)

    # Drop the handler from a previous call, its stream may be gone
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(logging.INFO if verbose else logging.CRITICAL)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    return logger
