"""
Harvesters — move packager output into the requested output directory.

jsii-pacmak writes each language to a conventional location inside
the staging directory. A Harvester knows that location for its
language and how to lay the result out for the caller.

Adding a language means one Harvester subclass and one entry in
``HARVESTERS``; the orchestrator does not change.
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from bindgen.core.errors import HarvestError, UnsupportedLanguageError
from bindgen.core.models.language import Language

logger = logging.getLogger(__name__)


class Harvester(ABC):
    """Per-language rules for collecting packager output."""

    language: Language

    @abstractmethod
    def harvest(self, workdir: Path, output_dir: Path, name: str) -> Path:
        """Move the packaged code for ``name`` into ``output_dir``.

        Returns:
            The destination path.
        """

    def finalize(self, output_dir: Path) -> None:
        """Run once per request, after every name has been harvested."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} language={self.language.value!r}>"


class TypeScriptHarvester(Harvester):
    """TypeScript is saved directly, so harvesting it is a bug."""

    language = Language.TYPESCRIPT

    def harvest(self, workdir: Path, output_dir: Path, name: str) -> Path:
        raise HarvestError("no op for typescript")


class PythonHarvester(Harvester):
    """``dist/python/src/<name>`` → ``<output>/<name>``, plus ``__init__.py``."""

    language = Language.PYTHON

    def source_path(self, workdir: Path, name: str) -> Path:
        return workdir / "dist" / self.language.value / "src" / name

    def harvest(self, workdir: Path, output_dir: Path, name: str) -> Path:
        source = self.source_path(workdir, name)
        target = output_dir / name

        if not source.exists():
            raise HarvestError(f"packager output not found: {source}")

        try:
            if target.exists():
                # Overwrite: no stale files from a previous run
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink()
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source), str(target))
        except OSError as e:
            raise HarvestError(f"cannot move {source} to {target}: {e}") from e

        logger.info("Harvested %s → %s", name, target)
        return target

    def finalize(self, output_dir: Path) -> None:
        # Make the output dir a Python package for IDEs and linting
        marker = output_dir / "__init__.py"
        try:
            marker.write_text("", encoding="utf-8")
        except OSError as e:
            raise HarvestError(f"cannot write package marker {marker}: {e}") from e


# Exhaustive over Language; None marks a language with no strategy yet.
HARVESTERS: dict[Language, type[Harvester] | None] = {
    Language.TYPESCRIPT: TypeScriptHarvester,
    Language.PYTHON: PythonHarvester,
    Language.DOTNET: None,
    Language.JAVA: None,
}


def get_harvester(language: Language) -> Harvester:
    """Instantiate the harvester for ``language``.

    Raises:
        UnsupportedLanguageError: If the language has no harvester.
    """
    harvester_cls = HARVESTERS.get(language)
    if harvester_cls is None:
        raise UnsupportedLanguageError(language.value)
    return harvester_cls()
