"""
Logging configuration for the fitting modules.

Library modules only create loggers; entry points such as fit_demo call
setup_logging once to attach handlers.
"""
import logging
import sys
from typing import Iterable, List, Optional

FIT_LOGGERS = ('curve_fitter', 'fit_session')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  names: Iterable[str] = FIT_LOGGERS) -> List[logging.Logger]:
    """
    Sends the named loggers to stdout, and to log_file when given.
    Handlers from an earlier call are replaced rather than stacked.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    loggers = []
    for name in names:
        logger = logging.getLogger(name)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        logger.setLevel(level)
        logger.propagate = False
        for handler in handlers:
            logger.addHandler(handler)
        loggers.append(logger)
    return loggers
