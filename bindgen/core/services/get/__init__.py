"""Binding generation — orchestrator, compile step and harvesters."""

from bindgen.core.services.get.base import (
    MODULE_LAYOUT,
    PROVIDER_LAYOUT,
    GetBase,
    TypesLayout,
    check_collisions,
    layout_for,
)
from bindgen.core.services.get.harvest import HARVESTERS, Harvester, get_harvester
from bindgen.core.services.get.targets import ConstraintGet

__all__ = [
    "ConstraintGet",
    "GetBase",
    "HARVESTERS",
    "Harvester",
    "MODULE_LAYOUT",
    "PROVIDER_LAYOUT",
    "TypesLayout",
    "check_collisions",
    "get_harvester",
    "layout_for",
]
