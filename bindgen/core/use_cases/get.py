"""
Get use case — generate bindings for a project's providers and modules.

Names given on the command line win over bindgen.yml. Providers and
modules are separate requests (providers first); the first failure
ends the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bindgen.adapters.registry import AdapterRegistry
from bindgen.core.config.loader import ConfigError, find_project_file, load_project, project_root
from bindgen.core.errors import BindgenError
from bindgen.core.models.language import Language
from bindgen.core.models.project import ProjectConfig
from bindgen.core.models.request import GenerationRequest
from bindgen.core.services.get import ConstraintGet, layout_for

logger = logging.getLogger(__name__)


@dataclass
class GetResult:
    """Outcome of a ``get`` run."""

    language: Language | None = None
    output_dir: Path | None = None
    requests: list[GenerationRequest] = field(default_factory=list)
    generated: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "language": self.language.value if self.language else None,
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "providers": [n for r in self.requests if not r.is_module for n in r.names],
            "modules": [n for r in self.requests if r.is_module for n in r.names],
            "generated": [str(p) for p in self.generated],
            "errors": self.errors,
        }


def _load_defaults(config_path: Path | None, required: bool) -> tuple[ProjectConfig, Path]:
    """Config plus the directory relative output paths resolve against."""
    path = config_path or find_project_file()
    if path is None and not required:
        return ProjectConfig(), Path.cwd()
    config = load_project(path)
    assert path is not None  # load_project raised otherwise
    return config, project_root(path)


def run_get(
    config_path: Path | None = None,
    language: str | None = None,
    output: str | None = None,
    providers: list[str] | None = None,
    modules: list[str] | None = None,
    registry: AdapterRegistry | None = None,
    staging_root: Path | None = None,
) -> GetResult:
    """Generate bindings.

    Args:
        config_path: Explicit bindgen.yml (default: search upward).
        language: Target language, overrides the config.
        output: Output directory, overrides the config.
        providers: Provider constraints; with ``modules``, overrides the config.
        modules: Module constraints.
        registry: Toolchain dispatcher (default: real jsii toolchain).
        staging_root: Parent for staging directories (default: system temp).
    """
    result = GetResult()
    from_cli = bool(providers or modules)

    try:
        config, root = _load_defaults(config_path, required=not from_cli)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    try:
        result.language = Language.parse(language) if language else config.language
    except BindgenError as e:
        result.errors.append(e.describe())
        return result

    out = Path(output or config.output)
    result.output_dir = out if out.is_absolute() else root / out

    if from_cli:
        provider_names, module_names = list(providers or []), list(modules or [])
    else:
        provider_names, module_names = config.providers, config.modules

    for names, is_module in ((provider_names, False), (module_names, True)):
        if names:
            result.requests.append(
                GenerationRequest(
                    target_language=result.language,
                    output_directory=result.output_dir,
                    names=names,
                    is_module=is_module,
                )
            )

    if not result.requests:
        result.errors.append("No providers or modules to generate.")
        return result

    for request in result.requests:
        getter = ConstraintGet(
            layout=layout_for(request.is_module),
            registry=registry,
            staging_root=staging_root,
        )
        try:
            result.generated.extend(getter.get(request))
        except BindgenError as e:
            logger.error("Generation failed: %s", e.describe())
            result.errors.append(e.describe())
            break

    return result
