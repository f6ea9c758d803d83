import os
import sys
import logging

from .lazy_handler import LazyRotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(prefix, name=None, level=logging.WARNING, log_file=True):
    """
    Configure `name` (the root logger by default) to log to stderr at `level`
    and, unless `log_file` is false, everything down to DEBUG into
    log_<pid>.log in a private temporary directory starting with `prefix`.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    for handler in [h for h in logger.handlers if getattr(h, '_gordle', False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        log_name = f"log_{os.getpid()}.log"
        file_handler = LazyRotatingFileHandler(tmpdir_prefix=prefix + '.', basename=log_name,
                                               maxBytes=10*(1024 ** 2), backupCount=3)
        file_handler.setFormatter(formatter)
        file_handler._gordle = True
        logger.addHandler(file_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    stderr_handler._gordle = True
    logger.addHandler(stderr_handler)
    return logger
