"""Logger configuration for otter-coach.

Engine modules import ``logger`` from here. Records from the otter_coach
package are disabled until setup_logger() is called, so library callers see
no output unless they opt in.
"""

import sys

from loguru import logger

logger.disable("otter_coach")


def setup_logger(level: str = "WARNING") -> None:
    """Configure loguru with a single stderr handler and enable engine records.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Remove default handler
    logger.remove()

    # Resolve sys.stderr per message so a replaced stream is never written after close
    logger.add(
        lambda message: sys.stderr.write(message),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
    logger.enable("otter_coach")

    logger.debug(f"Logger initialized with level={level}")
