"""
Logging setup for the service.

``setup_logging`` attaches a single rich console handler to the root
logger.  It is a no-op when the root logger already has handlers, which
happens under pytest or when ``create_app`` runs more than once.
"""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
