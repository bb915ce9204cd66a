import logging
import os


def setup_logger(name="iawk", level="WARNING", log_file=None):
    # Configure Root Logger
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level.upper())

    # Remove existing handlers to avoid duplicates if called multiple times
    if logger.handlers:
        logger.handlers = []

    # Optional File Handler, always at INFO or finer
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(min(logging.INFO, logging.getLevelName(level.upper())))
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    # Console Handler on stderr, the diagnostic channel
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logging.getLogger(name)
