import os
import logging

from datetime import datetime

from pythonjsonlogger.json import JsonFormatter

from .app_config import LOG_DIR, LOG_LEVEL


def setup_logger(name="GradeNormalizer", log_dir=None):
    """
    Set up a logger with JSON formatting for structured logging.

    Parameters:
        name (str): Logger name
        log_dir (str): Directory for log files, defaults to LOG_DIR

    Returns:
        logging.Logger: Configured logger instance
    """
    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    date_str = datetime.now().strftime("%Y-%m-%d")
    log_file = os.path.join(log_dir, f"grade_normalizer_{date_str}.log")

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers if setup is called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.propagate = False

    # File Handler with JSON formatting
    file_handler = logging.FileHandler(log_file, mode='a')
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(JsonFormatter(
        '%(asctime)s %(levelname)s %(name)s %(message)s',
        rename_fields={'asctime': 'timestamp', 'levelname': 'level'}
    ))

    # Console Handler (human-readable for debugging)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter('%(levelname)s | %(name)s | %(message)s'))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
