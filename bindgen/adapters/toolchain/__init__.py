"""Toolchain adapters — jsii compiler and jsii-pacmak packager."""

from bindgen.adapters.toolchain.command import CommandAdapter
from bindgen.adapters.toolchain.jsii import JsiiAdapter
from bindgen.adapters.toolchain.pacmak import PacmakAdapter

__all__ = ["CommandAdapter", "JsiiAdapter", "PacmakAdapter"]
