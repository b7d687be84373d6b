"""
Binding generation orchestrator.

TypeScript is always generated first, for every requested name: it is
the form every other language is compiled from. For a TypeScript
target that emission is saved straight to the output directory. For
any other language each name goes through its own staging directory:

    save staged code → jsii (compile) → jsii-pacmak (package) → harvest

Names are processed one at a time. The first failure aborts the
request; the staging directory of the failing name is still removed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from bindgen.adapters.registry import AdapterRegistry, default_registry
from bindgen.adapters.toolchain.pacmak import pacmak_args
from bindgen.core.errors import (
    BindgenError,
    ExternalToolError,
    ResolutionError,
    StagingError,
)
from bindgen.core.models.action import Action
from bindgen.core.models.language import Language
from bindgen.core.models.request import GenerationRequest
from bindgen.core.services.codemaker import CodeMaker
from bindgen.core.services.constraint import (
    compile_safe_name,
    harvest_safe_name,
    resolve_constraint,
)
from bindgen.core.services.get.harvest import Harvester, get_harvester
from bindgen.core.services.get.jsii import compile_schema
from bindgen.core.services.workspace import temp_dir

logger = logging.getLogger(__name__)


class TypesLayout(BaseModel):
    """Where the typings for a provider or module live in the staged code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["provider", "module"]
    root: str

    def types_path(self, source: str) -> str:
        return f"{self.root}/{source}"


PROVIDER_LAYOUT = TypesLayout(kind="provider", root="providers")
MODULE_LAYOUT = TypesLayout(kind="module", root="modules")


def layout_for(is_module: bool) -> TypesLayout:
    return MODULE_LAYOUT if is_module else PROVIDER_LAYOUT


@contextmanager
def stage(target: str | None, name: str) -> Iterator[None]:
    """Stamp ``target``/``name`` onto any BindgenError raised in the block.

    Filesystem failures (``OSError``) are raised as ``StagingError``
    carrying the same stamp, with the original as ``__cause__``.
    """
    try:
        yield
    except BindgenError as e:
        if e.target is None:
            e.target = target
        if e.stage is None:
            e.stage = name
        raise
    except OSError as e:
        raise StagingError(str(e), target=target, stage=name) from e


def check_collisions(names: list[str], language: Language, is_module: bool) -> None:
    """Reject names that would be written to the same place.

    TypeScript output is keyed by source; harvested output by its
    harvest-safe directory name, so ``a-b`` and ``a_b`` collide there.

    Raises:
        ResolutionError: On a malformed name or the second of two
            colliding names.
    """
    kind = "module" if is_module else "provider"
    seen: dict[str, str] = {}
    for name in names:
        with stage(name, "resolve"):
            source = resolve_constraint(name).source(is_module)
        key = source if language.is_primary else harvest_safe_name(source)
        if key in seen:
            raise ResolutionError(
                f"collides with '{seen[key]}': both produce {kind} '{key}'",
                target=name,
                stage="resolve",
            )
        seen[key] = name


class GetBase(ABC):
    """Generate bindings for a list of providers or modules.

    Subclasses supply the TypeScript emission; the layout passed at
    construction decides where typings live for the compile step.
    """

    def __init__(
        self,
        layout: TypesLayout = PROVIDER_LAYOUT,
        registry: AdapterRegistry | None = None,
        staging_root: Path | None = None,
    ):
        self.layout = layout
        self.registry = registry if registry is not None else default_registry()
        self.staging_root = staging_root

    @abstractmethod
    def generate_typescript(
        self,
        code: CodeMaker,
        names: list[str],
        output_dir: Path,
        is_module: bool = False,
    ) -> None:
        """Emit TypeScript for every name into ``code``."""

    def types_path(self, source: str) -> str:
        return self.layout.types_path(source)

    def get(self, request: GenerationRequest) -> list[Path]:
        """Run one generation request.

        Returns:
            Files saved (TypeScript target) or directories harvested
            (any other language).

        Raises:
            UnsupportedLanguageError: Before any work, if the language
                cannot be produced.
            BindgenError: The first failure, stamped with name and stage.
        """
        language = request.target_language
        output_dir = request.output_directory.resolve()
        with stage(None, "output"):
            output_dir.mkdir(parents=True, exist_ok=True)

        harvester = get_harvester(language)

        if not request.names:
            logger.warning("No %ss requested, nothing to generate", request.kind)
            return []

        check_collisions(request.names, request.target_language, request.is_module)

        code = CodeMaker()
        with stage(None, "generate"):
            self.generate_typescript(code, request.names, output_dir, request.is_module)

        if language.is_primary:
            with stage(None, "save"):
                saved = code.save(output_dir)
            logger.info("Saved %d TypeScript file(s) to %s", len(saved), output_dir)
            return saved

        harvested: list[Path] = []
        for name in request.names:
            harvested.append(self._build_one(code, name, request, harvester, output_dir))

        with stage(None, "harvest"):
            harvester.finalize(output_dir)
        return harvested

    def _build_one(
        self,
        code: CodeMaker,
        name: str,
        request: GenerationRequest,
        harvester: Harvester,
        output_dir: Path,
    ) -> Path:
        """Stage, compile, package and harvest a single name."""
        language = request.target_language.value

        with stage(name, "resolve"):
            source = resolve_constraint(name).source(request.is_module)
        artifact = compile_safe_name(source)

        logger.info("Building %s %s for %s", request.kind, source, language)
        # "stage" also covers creating the staging directory
        with stage(name, "stage"), temp_dir("get", parent=self.staging_root) as workdir:
            code.save(workdir)

            with stage(name, "compile"):
                compile_schema(
                    workdir,
                    entry_point=source,
                    artifact_name=artifact,
                    types_path=self.types_path(source),
                    registry=self.registry,
                )

            with stage(name, "package"):
                receipt = self.registry.execute_action(
                    Action(
                        id=f"package:{artifact}",
                        adapter="jsii-pacmak",
                        args=pacmak_args(language),
                        for_target=source,
                    ),
                    working_dir=str(workdir),
                )
                if receipt.failed:
                    raise ExternalToolError(receipt)

            with stage(name, "harvest"):
                return harvester.harvest(workdir, output_dir, harvest_safe_name(source))
