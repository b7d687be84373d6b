"""
Code emitter — accumulate generated source in memory, save on demand.

Generators write line by line into an open file; nothing touches
disk until ``save()``. The same staged set can be saved any number
of times into different directories, which is how one TypeScript
emission feeds a staging directory per provider.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bindgen.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


class CodeMakerError(RuntimeError):
    """Misuse of the emitter API (unbalanced open/close)."""


class CodeMaker:
    """Staged set of generated source files."""

    def __init__(self, indentation: int = 2):
        self.indentation = indentation
        self._files: dict[str, GeneratedFile] = {}
        self._current: str | None = None
        self._lines: list[str] = []
        self._depth = 0

    @property
    def files(self) -> list[GeneratedFile]:
        """Completed files, in the order they were first opened."""
        return list(self._files.values())

    # ── Writing ─────────────────────────────────────────────────

    def open_file(self, path: str) -> None:
        if self._current is not None:
            raise CodeMakerError(f"Cannot open {path}: {self._current} is still open")
        self._current = path
        self._lines = []
        self._depth = 0

    def close_file(self, path: str) -> None:
        if self._current != path:
            raise CodeMakerError(f"Cannot close {path}: open file is {self._current}")
        if self._depth:
            raise CodeMakerError(f"Cannot close {path}: {self._depth} block(s) still open")
        self.add_file(path, "\n".join(self._lines) + "\n")
        self._current = None
        self._lines = []

    def line(self, text: str = "") -> None:
        if self._current is None:
            raise CodeMakerError("No open file")
        pad = " " * (self.indentation * self._depth) if text else ""
        self._lines.append(f"{pad}{text}")

    def open_block(self, text: str) -> None:
        self.line(f"{text} {{")
        self._depth += 1

    def close_block(self, text: str = "}") -> None:
        if not self._depth:
            raise CodeMakerError("No open block")
        self._depth -= 1
        self.line(text)

    def add_file(self, path: str, content: str) -> None:
        """Stage a whole file at once (replaces any previous content)."""
        self._files[path] = GeneratedFile(path=path, content=content)

    # ── Persistence ─────────────────────────────────────────────

    def save(self, directory: str | Path) -> list[Path]:
        """Write every staged file under ``directory``.

        Returns:
            Absolute paths of the files written.
        """
        if self._current is not None:
            raise CodeMakerError(f"Cannot save while {self._current} is open")

        root = Path(directory).resolve()
        written: list[Path] = []
        for generated in self._files.values():
            target = root / generated.path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(generated.content, encoding="utf-8")
            written.append(target)

        logger.debug("Saved %d file(s) to %s", len(written), root)
        return written
