"""
Mock adapter — test double for toolchain adapters.

Returns success by default. Can be configured to fail specific
actions, and to run a callback against the execution context so a
test can fake the files a real tool would have written.
"""

from __future__ import annotations

from collections.abc import Callable

from bindgen.adapters.base import Adapter, ExecutionContext
from bindgen.core.models.action import Receipt


class MockAdapter(Adapter):
    """Universal mock adapter for testing."""

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
        on_execute: Callable[[ExecutionContext], None] | None = None,
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._on_execute = on_execute
        self._failures: dict[str, str] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, target: str, error: str = "Mock failure") -> None:
        """Fail every action whose ``for_target`` (or id) equals ``target``."""
        self._failures[target] = error

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)
        action = context.action

        for key in (action.for_target, action.id):
            if key is not None and key in self._failures:
                return Receipt.failure(
                    adapter=self._name,
                    action_id=action.id,
                    error=self._failures[key],
                    return_code=1,
                )

        if self._on_execute is not None:
            self._on_execute(context)

        return Receipt.success(
            adapter=self._name,
            action_id=action.id,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        self._call_log.clear()
        self._failures.clear()
