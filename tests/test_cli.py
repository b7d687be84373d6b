"""
Tests for CLI commands — get, config check, tools, languages.
"""

import json
import textwrap
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from bindgen.main import cli


def _config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "bindgen.yml"
    path.write_text(textwrap.dedent(content))
    return path


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "generate language bindings" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGetCommand:
    def test_typescript_from_flags(self, tmp_path: Path):
        out = tmp_path / "gen"
        result = CliRunner().invoke(
            cli, ["get", "--language", "typescript", "--output", str(out), "--provider", "aws"],
        )
        assert result.exit_code == 0, result.output
        assert "Generated typescript bindings" in result.output
        assert (out / "providers" / "aws" / "index.ts").is_file()

    def test_python_from_config(self, tmp_path: Path, registry):
        config = _config(tmp_path, "language: python\noutput: gen\nproviders: [aws]\n")
        with patch("bindgen.core.services.get.base.default_registry", return_value=registry):
            result = CliRunner().invoke(cli, ["--config", str(config), "get", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["providers"] == ["aws"]
        assert (tmp_path / "gen" / "aws").is_dir()
        assert (tmp_path / "gen" / "__init__.py").is_file()

    def test_failure_exit_code(self, tmp_path: Path, registry, pacmak):
        pacmak.set_failure("aws", error="pacmak crashed")
        config = _config(tmp_path, "language: python\nproviders: [aws]\n")
        with patch("bindgen.core.services.get.base.default_registry", return_value=registry):
            result = CliRunner().invoke(cli, ["--config", str(config), "get"])

        assert result.exit_code == 1
        assert "Generation failed" in result.output
        assert "aws [package]" in result.output

    def test_unsupported_language(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli, ["get", "--language", "java", "--output", str(tmp_path), "--provider", "aws"],
        )
        assert result.exit_code == 1
        assert "unsupported language java" in result.output

    def test_output_is_a_file(self, tmp_path: Path):
        out = tmp_path / "out"
        out.write_text("taken\n")
        result = CliRunner().invoke(
            cli, ["get", "--language", "python", "--output", str(out), "--provider", "aws"],
        )
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Generation failed" in result.output
        assert "[output]" in result.output


class TestConfigCheckCommand:
    def test_valid(self, tmp_path: Path):
        config = _config(tmp_path, "language: python\nproviders: [aws]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Language: python" in result.output

    def test_invalid_json(self, tmp_path: Path):
        config = _config(tmp_path, "providers: [aws, aws]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["valid"] is False


class TestToolsCommand:
    def test_json(self, monkeypatch):
        monkeypatch.setenv("PATH", "")
        monkeypatch.delenv("BINDGEN_JSII", raising=False)
        monkeypatch.delenv("BINDGEN_JSII_PACMAK", raising=False)
        result = CliRunner().invoke(cli, ["tools", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["jsii"]["available"] is False
        assert data["jsii-pacmak"]["type"] == "PacmakAdapter"

    def test_human(self):
        result = CliRunner().invoke(cli, ["tools"])
        assert result.exit_code == 0
        assert "jsii-pacmak" in result.output


class TestLanguagesCommand:
    def test_lists_all(self):
        result = CliRunner().invoke(cli, ["languages"])
        assert result.exit_code == 0
        assert "typescript" in result.output and "direct" in result.output
        assert "python" in result.output and "via jsii-pacmak" in result.output
        assert "not supported yet" in result.output
