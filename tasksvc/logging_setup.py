import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level="INFO") -> None:
    """
    Send all logs to stdout. Call once, before the first log line.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=LOG_FORMAT,
        force=True,
    )
