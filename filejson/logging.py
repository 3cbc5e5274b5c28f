"""
filejson.logging - Centralized logging configuration.

All modules log through the ``filejson`` logger; nothing is emitted above
DEBUG unless the caller configures it.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("filejson")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the filejson package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
