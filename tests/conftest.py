"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bindgen.adapters.base import ExecutionContext
from bindgen.adapters.mock import MockAdapter
from bindgen.adapters.registry import AdapterRegistry
from bindgen.core.services.constraint import harvest_safe_name


def fake_pacmak_output(ctx: ExecutionContext) -> None:
    """Write what jsii-pacmak would leave behind for ``--target <lang>``."""
    language = ctx.action.args[ctx.action.args.index("--target") + 1]
    name = harvest_safe_name(ctx.action.for_target or "")
    pkg = Path(ctx.working_dir) / "dist" / language / "src" / name
    pkg.mkdir(parents=True, exist_ok=True)
    (pkg / "__init__.py").write_text(f"# bindings for {ctx.action.for_target}\n")


@pytest.fixture
def jsii() -> MockAdapter:
    return MockAdapter(adapter_name="jsii")


@pytest.fixture
def pacmak() -> MockAdapter:
    return MockAdapter(adapter_name="jsii-pacmak", on_execute=fake_pacmak_output)


@pytest.fixture
def registry(jsii: MockAdapter, pacmak: MockAdapter) -> AdapterRegistry:
    """Registry with a mocked jsii toolchain that produces real files."""
    reg = AdapterRegistry()
    reg.register(jsii)
    reg.register(pacmak)
    return reg


@pytest.fixture
def staging_root(tmp_path: Path) -> Path:
    """Parent directory for staging dirs, so tests can see them."""
    return tmp_path / "staging"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"
