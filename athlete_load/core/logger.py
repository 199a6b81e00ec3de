"""Logger configuration for the training load service.

Every record carries a ``scope`` extra field naming the data scope being
computed (``own:<user_id>``, ``athlete:<athlete_id>``, or ``-`` outside any
scope). Wrap scoped work in log_scope() to tag everything logged inside it.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[scope]}</magenta> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[scope]} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure the console sink and, if log_file is set, a rotating file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. Records are written as JSON lines.
        rotation: Rotation trigger (e.g., "10 MB", "1 day")
        retention: Retention period (e.g., "7 days")
    """
    logger.remove()
    logger.configure(extra={"scope": "-"})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            serialize=True,
            backtrace=True,
            diagnose=False,
        )

    logger.info(f"Logger initialized with level={level} file={log_file or '-'}")


def log_scope(kind: str, subject_id: str):
    """Context manager tagging records logged inside it with the data scope.

    Example:
        with log_scope("athlete", athlete_id):
            ...
    """
    return logger.contextualize(scope=f"{kind}:{subject_id}")
