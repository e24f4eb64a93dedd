"""Logging setup using loguru."""

from pathlib import Path

from loguru import logger


def setup_logger(
    level: str = "INFO",
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Configure loguru for a full-screen app.

    The terminal belongs to the UI, so records only go to a file. Without
    a file, records from this package are dropped.

    Args:
        level: Minimum logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        rotation: When to rotate log files (e.g., "10 MB", "1 day")
        retention: How long to keep log files (e.g., "1 week", "30 days")
    """
    logger.remove()

    if log_file is None:
        logger.disable("kanban")
        return

    logger.enable("kanban")
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message}"
    )

    logger.add(
        log_file,
        format=file_format,
        level=level,
        rotation=rotation,
        retention=retention,
        backtrace=True,
        diagnose=False,
    )

    logger.info(f"Logging to file: {log_file}")
