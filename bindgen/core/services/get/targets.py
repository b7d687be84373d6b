"""
Constraint bindings — the TypeScript emission used by the CLI.

For each provider or module this emits a small module at
``<layout root>/<source>/index.ts`` exposing the resolved constraint
as class constants, plus a ``versions.json`` index of every
requested constraint. Other languages get the same surface through
the jsii pipeline.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from bindgen.core.services.codemaker import CodeMaker
from bindgen.core.services.constraint import TargetConstraint, resolve_constraint
from bindgen.core.services.get.base import GetBase, stage

VERSIONS_FILE = "versions.json"


def class_name(name: str) -> str:
    """``google-beta`` → ``GoogleBetaConstraint``."""
    words = [w for w in re.split(r"[^A-Za-z0-9]+", name) if w]
    base = "".join(w[:1].upper() + w[1:] for w in words) or "Target"
    if base[0].isdigit():
        base = f"T{base}"
    return f"{base}Constraint"


def _ts_string(value: str) -> str:
    return json.dumps(value)


class ConstraintGet(GetBase):
    """Emit one constraint module per requested provider or module."""

    def generate_typescript(
        self,
        code: CodeMaker,
        names: list[str],
        output_dir: Path,
        is_module: bool = False,
    ) -> None:
        versions: dict[str, str] = {}
        for name in names:
            with stage(name, "resolve"):
                constraint = resolve_constraint(name)
            source = constraint.source(is_module)
            self._emit(code, constraint, self.types_path(source))
            versions[constraint.fqn] = constraint.version or "*"

        code.add_file(VERSIONS_FILE, json.dumps(versions, indent=2, sort_keys=True) + "\n")

    def _emit(self, code: CodeMaker, constraint: TargetConstraint, types_path: str) -> None:
        path = f"{types_path}/index.ts"
        code.open_file(path)
        code.line(f"// generated by bindgen from {_ts_string(constraint.constraint)}")
        code.line()
        code.open_block(f"export class {class_name(constraint.name)}")
        code.line(f"public static readonly FQN = {_ts_string(constraint.fqn)};")
        code.line(f"public static readonly NAME = {_ts_string(constraint.name)};")
        code.line(f"public static readonly VERSION = {_ts_string(constraint.version or '*')};")
        code.close_block()
        code.close_file(path)
