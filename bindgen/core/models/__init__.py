"""
Domain models — Pydantic types for binding generation.

    from bindgen.core.models import GenerationRequest, Language, Receipt
"""

from bindgen.core.models.action import Action, Receipt
from bindgen.core.models.language import LANGUAGES, Language
from bindgen.core.models.project import ProjectConfig
from bindgen.core.models.request import GenerationRequest
from bindgen.core.models.template import GeneratedFile

__all__ = [
    "Action",
    "GeneratedFile",
    "GenerationRequest",
    "LANGUAGES",
    "Language",
    "ProjectConfig",
    "Receipt",
]
