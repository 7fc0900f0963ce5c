import logging
import sys

from conference_data.config import LOGGER_NAME


def init_logging(level=logging.INFO, name=LOGGER_NAME):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s", "%d.%m.%Y %H:%M:%S %z"))
    logger.addHandler(handler)
