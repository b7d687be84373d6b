"""
jsii-pacmak adapter — the multi-language packager.

Reads the compiled assembly in the working directory and writes
sources for one target language under ``dist/<language>/src/``.
"""

from __future__ import annotations

from pathlib import Path

from bindgen.adapters.base import ExecutionContext
from bindgen.adapters.toolchain.command import CommandAdapter


class PacmakAdapter(CommandAdapter):
    command = "jsii-pacmak"
    env_var = "BINDGEN_JSII_PACMAK"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        ok, msg = super().validate(context)
        if not ok:
            return ok, msg
        if "--target" not in context.action.args:
            return False, "Missing required arg: '--target'"
        if not (Path(context.working_dir) / ".jsii").is_file():
            return False, f"No compiled .jsii assembly in {context.working_dir}"
        return True, ""


def pacmak_args(language: str) -> list[str]:
    """Arguments for a code-only build of one language."""
    return ["--target", language, "--code-only"]
