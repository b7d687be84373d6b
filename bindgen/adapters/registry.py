"""
Adapter registry — central dispatch for toolchain invocations.

The generation pipeline never talks to adapters directly: it asks the
registry to execute an Action and gets a Receipt back.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from bindgen.adapters.base import Adapter, ExecutionContext
from bindgen.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Central registry and dispatcher for adapters."""

    def __init__(self) -> None:
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        name = adapter.name
        if name in self._adapters:
            logger.warning("Overwriting existing adapter: %s", name)
        self._adapters[name] = adapter
        logger.debug("Registered adapter: %s", name)

    def unregister(self, name: str) -> None:
        self._adapters.pop(name, None)

    def get(self, name: str) -> Adapter | None:
        return self._adapters.get(name)

    def list_adapters(self) -> list[str]:
        return list(self._adapters.keys())

    def adapter_status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered adapter."""
        status = {}
        for name, adapter in self._adapters.items():
            try:
                available = adapter.is_available()
            except Exception:
                available = False
            status[name] = {
                "name": name,
                "available": available,
                "type": adapter.__class__.__name__,
            }
        return status

    def execute_action(
        self,
        action: Action,
        working_dir: str = ".",
        env: dict[str, str] | None = None,
        timeout: int = 600,
    ) -> Receipt:
        """Execute an action through its adapter.

        Resolves the adapter, validates, executes and stamps the
        duration. Never raises: every failure comes back as a
        failed Receipt.
        """
        start_time = time.monotonic()

        context = ExecutionContext(
            action=action,
            working_dir=working_dir,
            env=env or {},
            timeout=timeout,
        )

        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No adapter registered for '{action.adapter}'",
            )

        try:
            is_valid, error_msg = adapter.validate(context)
            if not is_valid:
                return Receipt.failure(
                    adapter=action.adapter,
                    action_id=action.id,
                    error=f"Validation failed: {error_msg}",
                )
        except Exception as e:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation error: {e}",
            )

        logger.info("Running %s (%s) in %s", action.adapter, action.id, working_dir)
        try:
            receipt = adapter.execute(context)
        except Exception as e:
            # Adapters should never raise
            logger.error("Adapter %s raised during execution: %s", action.adapter, e)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        if receipt.failed:
            logger.warning("%s (%s) failed: %s", action.adapter, action.id, receipt.error)
        return receipt


def default_registry() -> AdapterRegistry:
    """Registry wired with the real jsii toolchain."""
    from bindgen.adapters.toolchain.jsii import JsiiAdapter
    from bindgen.adapters.toolchain.pacmak import PacmakAdapter

    registry = AdapterRegistry()
    registry.register(JsiiAdapter())
    registry.register(PacmakAdapter())
    return registry
