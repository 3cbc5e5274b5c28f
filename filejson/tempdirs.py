"""
filejson.tempdirs - Unique temporary directories.

Directories are created and handed over; removing them is the caller's job.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from filejson.logging import logger


def temporary_root(root: os.PathLike | None = None) -> Path:
    """Return the directory temporary directories are created under."""
    if root is not None:
        return Path(root)
    return Path(tempfile.gettempdir())


def _same_device(a: Path, b: Path) -> bool:
    return os.stat(a).st_dev == os.stat(b).st_dev


def create_temporary_directory(
    appropriate_for: os.PathLike | None = None,
    root: os.PathLike | None = None,
    prefix: str = "filejson-",
) -> Path:
    """Create a fresh, empty, uniquely named directory.

    The directory can hold several temporary files used for a common
    purpose::

        work_dir = create_temporary_directory()
        first = work_dir / "part-1.json"
        second = work_dir / "part-2.json"

    When ``appropriate_for`` names a file or directory on another volume than
    the temporary root, the directory is created beside it instead, so files
    staged there can be moved over the original with ``os.replace``.

    Args:
        appropriate_for: Item the directory will be used to replace
        root: Overrides the system temporary directory
        prefix: Name prefix for the new directory

    Returns:
        Path to the new directory

    Raises:
        OSError: If the root cannot be determined or the directory cannot be
            created
    """
    base = temporary_root(root)
    if appropriate_for is not None:
        target = Path(appropriate_for)
        anchor = target if target.is_dir() else target.parent
        if not _same_device(anchor, base):
            base = anchor

    path = Path(tempfile.mkdtemp(prefix=prefix, dir=base))
    logger.debug("Created temporary directory %s", path)
    return path
