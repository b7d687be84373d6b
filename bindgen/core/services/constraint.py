"""
Provider/module constraint resolution.

A constraint names a Terraform provider or module with an optional
version requirement::

    aws                                  → name "aws",  fqn "aws"
    hashicorp/aws@~> 3.0                 → name "aws",  fqn "hashicorp/aws"
    terraform-aws-modules/vpc/aws@2.21.0 → name "aws",  fqn "terraform-aws-modules/vpc/aws"

The fully qualified form is everything before ``@``; the short name is
its last path segment.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict

from bindgen.core.errors import ResolutionError

logger = logging.getLogger(__name__)

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class TargetConstraint(BaseModel):
    """A resolved provider or module reference."""

    model_config = ConfigDict(frozen=True)

    constraint: str
    fqn: str
    name: str
    namespace: str | None = None
    version: str | None = None

    def source(self, is_module: bool) -> str:
        """Identifier used for compilation: fqn for modules, short name otherwise."""
        return self.fqn if is_module else self.name


def resolve_constraint(constraint: str) -> TargetConstraint:
    """Parse a constraint string into its canonical names.

    Raises:
        ResolutionError: If the constraint is empty or malformed.
    """
    text = (constraint or "").strip()
    if not text:
        raise ResolutionError("empty provider/module constraint")

    fqn, sep, version = text.partition("@")
    fqn = fqn.strip()
    version = version.strip()
    if "@" in version:
        raise ResolutionError(f"invalid constraint '{constraint}': more than one '@'")
    if sep and not version:
        raise ResolutionError(f"invalid constraint '{constraint}': empty version after '@'")

    parts = fqn.split("/")
    for part in parts:
        if not _SEGMENT_RE.match(part):
            raise ResolutionError(f"invalid constraint '{constraint}': bad segment '{part}'")

    resolved = TargetConstraint(
        constraint=text,
        fqn=fqn,
        name=parts[-1],
        namespace=parts[-2] if len(parts) >= 2 else None,
        version=version or None,
    )
    logger.debug("Resolved %r → fqn=%s name=%s", constraint, resolved.fqn, resolved.name)
    return resolved


# ── Identifier sanitizers ───────────────────────────────────────


def compile_safe_name(source: str) -> str:
    """Artifact name for the schema compiler: every ``/`` becomes ``_``."""
    return source.replace("/", "_")


def harvest_safe_name(source: str) -> str:
    """Directory name for harvested output: every ``-`` becomes ``_``."""
    return source.replace("-", "_")
