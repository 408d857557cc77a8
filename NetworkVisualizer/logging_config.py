# NetworkVisualizer/logging_config.py
import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """Configure the ``NetworkVisualizer`` logger.

    Logs go to stdout, and additionally to ``log_file`` when one is given.
    Calling this again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger("NetworkVisualizer")
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
