"""
Schema compile step — stage a jsii manifest and run the compiler.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bindgen.adapters.registry import AdapterRegistry
from bindgen.core.errors import ExternalToolError
from bindgen.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


def build_manifest(entry_point: str, artifact_name: str, types_path: str) -> dict[str, Any]:
    """jsii ``package.json`` for one staged provider or module."""
    return {
        "name": artifact_name,
        "version": "0.0.0",
        "description": f"Generated bindings for {entry_point}",
        "author": "generated@generated.com",
        "license": "UNLICENSED",
        "repository": {"url": "http://generated", "type": "git"},
        "main": f"{types_path}/index.js",
        "types": f"{types_path}/index.d.ts",
        "jsii": {
            "outdir": "dist",
            "targets": {
                "python": {
                    "distName": "generated",
                    "module": artifact_name,
                },
            },
        },
    }


def compile_schema(
    root_dir: Path,
    *,
    entry_point: str,
    artifact_name: str,
    types_path: str,
    registry: AdapterRegistry,
) -> Receipt:
    """Compile the TypeScript staged in ``root_dir`` into a jsii assembly.

    Args:
        root_dir: Staging directory holding the saved code.
        entry_point: Provider/module identifier being compiled.
        artifact_name: Compile-safe package name.
        types_path: Directory (relative to root_dir) holding the typings.
        registry: Dispatches the ``jsii`` action.

    Raises:
        ExternalToolError: If the compiler fails.
    """
    manifest = build_manifest(entry_point, artifact_name, types_path)
    (root_dir / MANIFEST_FILE).write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote jsii manifest for %s (main=%s)", artifact_name, manifest["main"])

    receipt = registry.execute_action(
        Action(id=f"compile:{artifact_name}", adapter="jsii", for_target=entry_point),
        working_dir=str(root_dir),
    )
    if receipt.failed:
        raise ExternalToolError(receipt)
    return receipt
