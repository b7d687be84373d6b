"""
Target languages for generated bindings.

TypeScript is the primary language: it is emitted directly and is
the intermediate form every other language is compiled from.
"""

from __future__ import annotations

from enum import Enum

from bindgen.core.errors import UnsupportedLanguageError


class Language(str, Enum):
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    DOTNET = "dotnet"
    JAVA = "java"

    @property
    def is_primary(self) -> bool:
        """Whether code for this language is saved without compilation."""
        return _PRIMARY[self]

    @classmethod
    def parse(cls, value: str | Language) -> Language:
        """Look up a language by name (case-insensitive).

        Raises:
            UnsupportedLanguageError: If no such language exists.
        """
        if isinstance(value, Language):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnsupportedLanguageError(value) from None


# One entry per member; tests assert the table is exhaustive.
_PRIMARY: dict[Language, bool] = {
    Language.TYPESCRIPT: True,
    Language.PYTHON: False,
    Language.DOTNET: False,
    Language.JAVA: False,
}

# Languages the pipeline can actually produce today.
LANGUAGES: list[Language] = [Language.TYPESCRIPT, Language.PYTHON]
