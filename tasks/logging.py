"""Logging configuration of the tasks."""
import logging


def configure_root_logger(level: int = logging.INFO) -> None:
    """Log the tasks' progress (and the package's messages) to the console."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
