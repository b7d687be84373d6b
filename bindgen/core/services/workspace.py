"""
Scoped staging directories.

Each per-provider iteration of the pipeline runs inside its own
temporary directory, which is removed on every exit path.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


@contextmanager
def temp_dir(prefix: str = "get", parent: Path | None = None) -> Iterator[Path]:
    """Create a temporary directory and delete it when the block exits.

    Args:
        prefix: Name prefix for the directory.
        parent: Where to create it (default: the system temp dir).
    """
    if parent is not None:
        parent.mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix=f"{prefix}-", dir=parent))
    logger.debug("Staging in %s", path)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug("Removed staging dir %s", path)
