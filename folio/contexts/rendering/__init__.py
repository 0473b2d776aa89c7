"""
Rendering Context

Responsibilities:
- Looks up stored resumes (owner-checked or public by slug)
- Layers a resume's custom DSL over its theme DSL
- Orchestrates validate -> migrate -> compile for previews and stored resumes

Owns: Storage contract, theme merging, render entry points
Never: Resolves tokens or decides layout
"""

from folio.contexts.rendering.exceptions import ResumeForbiddenError, ResumeNotFoundError
from folio.contexts.rendering.renderer import DslRenderer, RenderResult
from folio.contexts.rendering.storage import InMemoryResumeStore, ResumeStore
from folio.contexts.rendering.theme_resolver import merge_dsl

__all__ = [
    "DslRenderer",
    "RenderResult",
    "ResumeStore",
    "InMemoryResumeStore",
    "merge_dsl",
    "ResumeNotFoundError",
    "ResumeForbiddenError",
]
