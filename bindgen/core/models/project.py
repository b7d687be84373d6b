"""
Project configuration model — loaded from bindgen.yml.

Declares which providers and modules a project wants bindings for,
the language to generate, and where the generated code goes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from bindgen.core.models.language import Language


class ProjectConfig(BaseModel):
    """Root configuration of a bindings project."""

    language: Language = Language.TYPESCRIPT
    output: str = ".gen"
    providers: list[str] = Field(default_factory=list)
    modules: list[str] = Field(default_factory=list)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: object) -> Language:
        if isinstance(value, str):
            return Language.parse(value)
        return value  # type: ignore[return-value]

    @field_validator("providers", "modules", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        # An empty YAML key ("providers:") loads as None
        return [] if value is None else value
