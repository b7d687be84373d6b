"""
jsii adapter — the schema compiler.

Compiles the TypeScript staged in the working directory into a jsii
assembly, driven by the ``package.json`` manifest written beside it.
"""

from __future__ import annotations

from pathlib import Path

from bindgen.adapters.base import ExecutionContext
from bindgen.adapters.toolchain.command import CommandAdapter


class JsiiAdapter(CommandAdapter):
    command = "jsii"
    env_var = "BINDGEN_JSII"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        ok, msg = super().validate(context)
        if not ok:
            return ok, msg
        if not (Path(context.working_dir) / "package.json").is_file():
            return False, f"No package.json in {context.working_dir}"
        return True, ""
