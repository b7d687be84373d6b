"""
Generated file model — one staged source file.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file held in the code emitter until it is saved.

    Attributes:
        path:    Path relative to the directory the emitter saves into.
        content: Full file content.
    """

    path: str
    content: str
