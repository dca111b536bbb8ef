import logging
import sys

LOGGER_NAME = "vc_provisioner"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(debug: bool = False, stream=None) -> logging.Logger:
    """Return the application logger, set to DEBUG or INFO, writing to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
