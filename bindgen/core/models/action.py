"""
Action and Receipt models — the toolchain execution contract.

An Action asks an adapter to run one external tool invocation
(``jsii``, ``jsii-pacmak``). A Receipt records what happened.
Adapters hand back Receipts, never exceptions; the generation
pipeline decides which failed receipts are fatal.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """A single tool invocation to be dispatched through the registry."""

    id: str                         # e.g. "compile:aws", "package:aws"
    adapter: str                    # which adapter handles this
    args: list[str] = Field(default_factory=list)
    params: dict[str, Any] = Field(default_factory=dict)
    for_target: str | None = None   # provider/module name being processed


class Receipt(BaseModel):
    """Outcome of one tool invocation."""

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    command: str = ""
    return_code: int | None = None
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    def summary(self) -> str:
        """One-line description used in error messages."""
        if self.ok:
            return f"{self.adapter} succeeded"
        code = f" (exit {self.return_code})" if self.return_code is not None else ""
        detail = f": {self.error}" if self.error else ""
        return f"{self.adapter} failed{code}{detail}"

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )

