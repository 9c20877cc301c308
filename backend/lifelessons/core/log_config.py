# lifelessons/core/log_config.py
import logging
import os
from logging.handlers import RotatingFileHandler

from lifelessons.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = None, log_dir: str = None) -> logging.Logger:
    """
    Configure the root logger once: stderr always, a rotating file when a
    log directory is configured.
    """
    level = level or settings.LOG_LEVEL
    log_dir = log_dir if log_dir is not None else settings.LOG_DIR

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, "_lifelessons", False) for h in root.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        stream._lifelessons = True
        root.addHandler(stream)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            handler = RotatingFileHandler(
                os.path.join(log_dir, "api.log"), maxBytes=5 * 1024 * 1024, backupCount=5
            )
            handler.setFormatter(formatter)
            handler._lifelessons = True
            root.addHandler(handler)

    return logging.getLogger("lifelessons")
