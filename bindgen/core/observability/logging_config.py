"""
Logging configuration — set up once by the CLI entrypoint.

Every module logs through ``logging.getLogger(__name__)`` and inherits
what is configured here.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  BINDGEN_LOG_LEVEL  >  WARNING

A log file (BINDGEN_LOG_FILE) always gets the detailed format, at
BINDGEN_LOG_FILE_LEVEL or the console level. Toolchain output that
adapters log at DEBUG only shows up there or with --debug.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT = "%H:%M:%S"


class LogSettings(BaseModel):
    """Resolved logging options for one CLI invocation."""

    level: str = "WARNING"
    file: Path | None = None
    file_level: str | None = None

    @classmethod
    def from_cli(
        cls,
        *,
        debug: bool = False,
        verbose: bool = False,
        quiet: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> LogSettings:
        env = os.environ if environ is None else environ
        if debug:
            level = "DEBUG"
        elif verbose:
            level = "INFO"
        elif quiet:
            level = "ERROR"
        else:
            level = env.get("BINDGEN_LOG_LEVEL") or "WARNING"
        return cls(
            level=level,
            file=env.get("BINDGEN_LOG_FILE") or None,
            file_level=env.get("BINDGEN_LOG_FILE_LEVEL") or None,
        )

    @property
    def console_level(self) -> int:
        return _parse_level(self.level)

    @property
    def file_log_level(self) -> int:
        return _parse_level(self.file_level) if self.file_level else self.console_level


def setup_logging(settings: LogSettings) -> list[logging.Handler]:
    """Replace the root logger's handlers according to ``settings``.

    Returns:
        The handlers installed (console first, then the file if any).
    """
    console_level = settings.console_level

    if console_level <= logging.DEBUG:
        console_fmt = logging.Formatter(_FMT_DETAILED, datefmt=_DATEFMT)
    elif console_level <= logging.INFO:
        console_fmt = logging.Formatter(_FMT_VERBOSE, datefmt=_DATEFMT)
    else:
        console_fmt = logging.Formatter(_FMT_MINIMAL)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(console_fmt)
    handlers: list[logging.Handler] = [console]

    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(settings.file, encoding="utf-8")
        fh.setLevel(settings.file_log_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAILED))
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))

    logging.raiseExceptions = False
    return handlers


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING if unknown)."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
