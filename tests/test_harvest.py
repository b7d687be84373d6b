"""
Tests for per-language harvesters.
"""

from pathlib import Path

import pytest

from bindgen.core.errors import HarvestError, UnsupportedLanguageError
from bindgen.core.models.language import Language
from bindgen.core.services.get.harvest import (
    HARVESTERS,
    PythonHarvester,
    TypeScriptHarvester,
    get_harvester,
)


def _packaged(workdir: Path, name: str, files: dict[str, str]) -> Path:
    pkg = workdir / "dist" / "python" / "src" / name
    pkg.mkdir(parents=True)
    for rel, content in files.items():
        (pkg / rel).write_text(content)
    return pkg


class TestDispatchTable:
    def test_covers_every_language(self):
        assert set(HARVESTERS) == set(Language)

    def test_python(self):
        assert isinstance(get_harvester(Language.PYTHON), PythonHarvester)

    def test_typescript(self):
        assert isinstance(get_harvester(Language.TYPESCRIPT), TypeScriptHarvester)

    @pytest.mark.parametrize("lang", [Language.DOTNET, Language.JAVA])
    def test_unsupported(self, lang):
        with pytest.raises(UnsupportedLanguageError) as exc:
            get_harvester(lang)
        assert lang.value in str(exc.value)
        assert exc.value.language == lang.value


class TestTypeScriptHarvester:
    def test_harvest_fails_loudly(self, tmp_path: Path):
        with pytest.raises(HarvestError, match="no op for typescript"):
            TypeScriptHarvester().harvest(tmp_path, tmp_path / "out", "aws")


class TestPythonHarvester:
    def test_moves_package(self, tmp_path: Path):
        work, out = tmp_path / "work", tmp_path / "out"
        _packaged(work, "aws", {"__init__.py": "x = 1\n"})
        out.mkdir()

        dest = PythonHarvester().harvest(work, out, "aws")

        assert dest == out / "aws"
        assert (out / "aws" / "__init__.py").read_text() == "x = 1\n"
        assert not (work / "dist" / "python" / "src" / "aws").exists()

    def test_overwrites_without_stale_files(self, tmp_path: Path):
        work, out = tmp_path / "work", tmp_path / "out"
        stale = out / "aws"
        stale.mkdir(parents=True)
        (stale / "old_module.py").write_text("stale\n")
        _packaged(work, "aws", {"__init__.py": "new\n"})

        PythonHarvester().harvest(work, out, "aws")

        assert (out / "aws" / "__init__.py").read_text() == "new\n"
        assert not (out / "aws" / "old_module.py").exists()

    def test_nested_name(self, tmp_path: Path):
        work, out = tmp_path / "work", tmp_path / "out"
        _packaged(work, "org/mod_name", {"__init__.py": ""})
        out.mkdir()
        dest = PythonHarvester().harvest(work, out, "org/mod_name")
        assert dest.is_dir()
        assert dest == out / "org" / "mod_name"

    def test_missing_output(self, tmp_path: Path):
        with pytest.raises(HarvestError, match="not found"):
            PythonHarvester().harvest(tmp_path, tmp_path / "out", "aws")

    def test_harvest_does_not_write_marker(self, tmp_path: Path):
        work, out = tmp_path / "work", tmp_path / "out"
        _packaged(work, "aws", {"__init__.py": ""})
        out.mkdir()
        PythonHarvester().harvest(work, out, "aws")
        assert not (out / "__init__.py").exists()

    def test_finalize_writes_empty_marker(self, tmp_path: Path):
        PythonHarvester().finalize(tmp_path)
        assert (tmp_path / "__init__.py").read_text() == ""
