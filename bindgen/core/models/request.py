"""
Generation request — one ``get`` invocation for one target language.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from bindgen.core.models.language import Language


class GenerationRequest(BaseModel):
    """What to generate, for which language, and where to put it.

    ``names`` are provider or module constraints as written by the user
    (``aws@~> 3.0``, ``terraform-aws-modules/vpc/aws``). ``is_module``
    switches both the identifier used for the artifact (fully qualified
    instead of short) and the types layout.
    """

    target_language: Language
    output_directory: Path
    names: list[str] = Field(default_factory=list)
    is_module: bool = False

    @field_validator("target_language", mode="before")
    @classmethod
    def _parse_language(cls, value: object) -> Language:
        if isinstance(value, str):
            return Language.parse(value)
        return value  # type: ignore[return-value]

    @property
    def kind(self) -> str:
        return "module" if self.is_module else "provider"
