import logging

from playlist_csv.logger_config import LOG_FORMAT, setup_logger


def test_setup_logger_replaces_previous_handler():
    logger = setup_logger()
    handler_count = len(logger.handlers)

    setup_logger(verbose=True)

    assert len(logger.handlers) == handler_count


def test_setup_logger_levels():
    logger = setup_logger(verbose=True)
    handler = logger.handlers[-1]

    assert logger.level == logging.INFO
    assert handler.level == logging.INFO
    assert handler.formatter._fmt == LOG_FORMAT

    handler = setup_logger(verbose=False).handlers[-1]

    assert handler.level == logging.CRITICAL
