import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mongowrap logging.

    The file handler is attached once per process. Later calls only apply
    ``level``; their ``home`` is ignored.

    Args:
        home: Directory receiving mongowrap.log. If None, derived from environment.
        level: Level name for the ``mongowrap`` logger.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("mongowrap")
    root_logger.setLevel(logging.getLevelName(level))
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "mongowrap.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Driver chatter stays out of our log unless it is a warning
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True
