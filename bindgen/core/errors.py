"""
Error taxonomy for binding generation.

Every failure the pipeline surfaces is a ``BindgenError``. The
orchestrator stamps the provider/module name and the pipeline stage
onto the error as it propagates, so the caller gets a single error
that says what failed and where. The concrete type is never changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bindgen.core.models.action import Receipt


class BindgenError(Exception):
    """Base class for all generation failures."""

    def __init__(
        self,
        message: str,
        *,
        target: str | None = None,
        stage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.target = target
        self.stage = stage

    def describe(self) -> str:
        """Render ``<target> [<stage>]: <message>`` with whatever is known."""
        prefix = ""
        if self.target:
            prefix = self.target
        if self.stage:
            prefix = f"{prefix} [{self.stage}]" if prefix else f"[{self.stage}]"
        return f"{prefix}: {self.message}" if prefix else self.message


class UnsupportedLanguageError(BindgenError):
    """The target language has no generation or harvest strategy."""

    def __init__(self, language: str, **kwargs: str | None) -> None:
        super().__init__(f"unsupported language {language} (yet)", **kwargs)
        self.language = language


class ExternalToolError(BindgenError):
    """The schema compiler or packager exited abnormally."""

    def __init__(self, receipt: Receipt, **kwargs: str | None) -> None:
        super().__init__(receipt.summary(), **kwargs)
        self.receipt = receipt


class HarvestError(BindgenError):
    """Packager output is missing or could not be moved into place."""


class ResolutionError(BindgenError):
    """A provider or module constraint could not be resolved."""


class StagingError(BindgenError):
    """A filesystem operation on the output or staging directory failed."""
