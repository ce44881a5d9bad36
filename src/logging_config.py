import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FILENAME = "party_builder.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

# HTTP client chatter from catalog fetches (one line per request)
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Attach console and rotating-file handlers to the root logger.

    The file handler always records DEBUG so pointer and fetch detail is
    available after the fact; the console follows *log_level*. Calling
    this again once a rotating file handler is attached is a no-op.

    Returns:
        Path of the active log file.
    """
    if log_dir is None:
        log_dir = Path(__file__).parent.parent / "logs"
    log_file = log_dir / LOG_FILENAME

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            return Path(handler.baseFilename)

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging to %s (console level=%s)", log_file, log_level)
    return log_file
