"""
Config check use case — validate bindgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bindgen.core.config.loader import ConfigError, find_project_file, load_project
from bindgen.core.errors import ResolutionError
from bindgen.core.models.project import ProjectConfig
from bindgen.core.services.constraint import resolve_constraint
from bindgen.core.services.get.base import check_collisions
from bindgen.core.services.get.harvest import HARVESTERS


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ProjectConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "language": self.config.language.value if self.config else None,
            "provider_count": len(self.config.providers) if self.config else 0,
            "module_count": len(self.config.modules) if self.config else 0,
        }


def _duplicates(names: list[str]) -> list[str]:
    return sorted({n for n in names if names.count(n) > 1})


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate project configuration and report issues."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_project_file()
    if config_path is None:
        result.errors.append("No bindgen.yml found.")
        return result
    result.config_path = config_path

    try:
        config = load_project(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    if not config.providers and not config.modules:
        result.warnings.append("No providers or modules declared. Nothing will be generated.")

    for kind, names in (("provider", config.providers), ("module", config.modules)):
        dupes = _duplicates(names)
        if dupes:
            result.errors.append(f"Duplicate {kind}s: {', '.join(dupes)}")
        resolvable = not dupes
        for name in names:
            try:
                resolve_constraint(name)
            except ResolutionError as e:
                result.errors.append(f"{kind} {e.message}")
                resolvable = False
        if resolvable:
            try:
                check_collisions(names, config.language, is_module=kind == "module")
            except ResolutionError as e:
                result.errors.append(f"{kind} {e.target} {e.message}")

    if HARVESTERS.get(config.language) is None:
        result.errors.append(f"unsupported language {config.language.value} (yet)")

    result.valid = len(result.errors) == 0
    return result
