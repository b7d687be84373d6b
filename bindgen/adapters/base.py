"""
Adapter base — the contract between the generation pipeline and
the external toolchain.

The pipeline never shells out directly. It builds an Action, hands it
to the AdapterRegistry, and inspects the Receipt that comes back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from bindgen.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to run one action."""

    action: Action
    working_dir: str = "."
    env: dict[str, str] = Field(default_factory=dict)
    timeout: int = 600


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.

    To add a tool:
        1. Subclass Adapter (or CommandAdapter for an executable)
        2. Implement name, is_available, validate, execute
        3. Register it in the AdapterRegistry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'jsii', 'jsii-pacmak')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the underlying tool can be found. Fast, never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
