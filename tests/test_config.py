"""
Tests for configuration loading and the config check use case.
"""

import textwrap
from pathlib import Path

import pytest

from bindgen.core.config.loader import ConfigError, find_project_file, load_project
from bindgen.core.models.language import Language
from bindgen.core.use_cases.config_check import check_config


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "bindgen.yml"
    path.write_text(textwrap.dedent(content))
    return path


class TestFindProjectFile:
    def test_in_start_dir(self, tmp_path: Path):
        path = _write(tmp_path, "language: python\n")
        assert find_project_file(tmp_path) == path.resolve()

    def test_walks_up(self, tmp_path: Path):
        path = _write(tmp_path, "language: python\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_file(nested) == path.resolve()

    def test_not_found(self, tmp_path: Path):
        nested = tmp_path / "empty"
        nested.mkdir()
        found = find_project_file(nested)
        assert found is None or not str(found).startswith(str(tmp_path))


class TestLoadProject:
    def test_full(self, tmp_path: Path):
        path = _write(tmp_path, """\
            language: python
            output: generated
            providers:
              - hashicorp/aws@~> 3.0
            modules:
              - terraform-aws-modules/vpc/aws
        """)
        cfg = load_project(path)
        assert cfg.language is Language.PYTHON
        assert cfg.output == "generated"
        assert cfg.providers == ["hashicorp/aws@~> 3.0"]
        assert cfg.modules == ["terraform-aws-modules/vpc/aws"]

    def test_empty_file(self, tmp_path: Path):
        cfg = load_project(_write(tmp_path, ""))
        assert cfg.language is Language.TYPESCRIPT

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_project(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_project(_write(tmp_path, "providers: [aws\n"))

    def test_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_project(_write(tmp_path, "- aws\n"))

    def test_unknown_language(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="cobol"):
            load_project(_write(tmp_path, "language: cobol\n"))

    def test_bad_field_type(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Invalid project configuration"):
            load_project(_write(tmp_path, "providers: 3\n"))


class TestCheckConfig:
    def test_valid(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "language: python\nproviders: [aws]\n"))
        assert result.valid
        assert result.warnings == []
        assert result.to_dict()["provider_count"] == 1

    def test_nothing_declared_warns(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "language: typescript\n"))
        assert result.valid
        assert any("Nothing will be generated" in w for w in result.warnings)

    def test_duplicates(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "providers: [aws, aws, google]\n"))
        assert not result.valid
        assert "Duplicate providers: aws" in result.errors

    def test_colliding_short_names(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "providers: [hashicorp/aws, other/aws]\n"))
        assert not result.valid
        assert result.errors == [
            "provider other/aws collides with 'hashicorp/aws': both produce provider 'aws'"
        ]

    def test_harvest_names_collide_only_for_python(self, tmp_path: Path):
        providers = "providers: [my-cloud, my_cloud]\n"
        assert check_config(_write(tmp_path, "language: typescript\n" + providers)).valid
        result = check_config(_write(tmp_path, "language: python\n" + providers))
        assert not result.valid
        assert "both produce provider 'my_cloud'" in result.errors[0]

    def test_bad_constraint(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "modules: ['org//mod']\n"))
        assert not result.valid
        assert result.errors[0].startswith("module invalid constraint")

    def test_language_without_harvester(self, tmp_path: Path):
        result = check_config(_write(tmp_path, "language: java\nproviders: [aws]\n"))
        assert not result.valid
        assert "unsupported language java (yet)" in result.errors

    def test_missing(self, tmp_path: Path):
        result = check_config(tmp_path / "bindgen.yml")
        assert not result.valid
        assert "not found" in result.errors[0]
