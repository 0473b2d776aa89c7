"""
Render orchestration.

Entry points the outside world calls:

    validate(raw)                         structural check only, no compile
    preview(raw, target)                  compile an in-memory document, no storage
    render(resume_id, user_id, target)    compile the owner's stored resume
    render_public(slug, target)           compile a published resume by slug

Stored resumes compile from their theme DSL with the owner's custom DSL
merged over it, filled with the resume's own records. Documents at an older
schema version are migrated in memory; the migrated form is not written back.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from folio.contexts.compiling import DslCompiler, ResumeAst, ResumeRecord, create_compiler
from folio.contexts.rendering.logger import (
    log_render_failure,
    log_render_result,
    log_render_start,
)
from folio.contexts.rendering.storage import InMemoryResumeStore, ResumeStore
from folio.contexts.rendering.theme_resolver import merge_dsl
from folio.contexts.schema import ClientError, validate, validate_or_throw


@dataclass
class RenderResult:
    """
    Result of rendering a stored resume.

    Attributes:
        ast: Compiled AST
        resume_id: Id of the resume that was rendered
    """

    ast: ResumeAst
    resume_id: str


class DslRenderer:
    """
    Orchestrates validation, storage lookup and compilation.

    Args:
        compiler: DSL compiler (defaults to one with the built-in migrators)
        store: Resume lookups (defaults to an empty in-memory store)
    """

    def __init__(self, compiler: Optional[DslCompiler] = None, store: Optional[ResumeStore] = None):
        self.compiler = compiler or create_compiler()
        self.store = store if store is not None else InMemoryResumeStore()

    def validate(self, raw: Any) -> Dict[str, Optional[List[str]]]:
        """
        Validate a raw document.

        Returns:
            {"valid": bool, "errors": list of errors, or None when valid}
        """
        result = validate(raw)
        return {"valid": result.valid, "errors": result.errors if not result.valid else None}

    def preview(self, raw: Any, target: str = "html") -> ResumeAst:
        """
        Compile an unsaved document with placeholder section data.

        Raises:
            DslValidationError: If the document (or target) is invalid
            MigrationError: If an older document cannot be upgraded
        """
        log_render_start("preview", target)
        try:
            ast = self.compiler.compile_from_raw(raw, target)
        except ClientError as e:
            log_render_failure("preview", e)
            raise
        log_render_result("preview", ast)
        return ast

    def render(self, resume_id: str, user_id: str, target: str = "html") -> RenderResult:
        """
        Compile a stored resume for its owner.

        Raises:
            ResumeNotFoundError: No resume with this id
            ResumeForbiddenError: The resume belongs to another user
            DslValidationError: The stored (merged) DSL is invalid
            MigrationError: The stored DSL cannot be upgraded
        """
        source = f"resume {resume_id}"
        log_render_start(source, target)
        try:
            resume = self.store.find_owned(resume_id, user_id)
            return self._render_stored(resume, target)
        except ClientError as e:
            log_render_failure(source, e)
            raise

    def render_public(self, slug: str, target: str = "html") -> RenderResult:
        """
        Compile a published resume by slug (no ownership check).

        Raises:
            ResumeNotFoundError: No resume with this slug, or it is not public
            DslValidationError: The stored (merged) DSL is invalid
            MigrationError: The stored DSL cannot be upgraded
        """
        source = f"public slug {slug}"
        log_render_start(source, target)
        try:
            resume = self.store.find_public(slug)
            return self._render_stored(resume, target)
        except ClientError as e:
            log_render_failure(source, e)
            raise

    def _render_stored(self, resume: ResumeRecord, target: str) -> RenderResult:
        document = merge_dsl(resume.theme_dsl, resume.custom_dsl)
        dsl = validate_or_throw(document)
        ast = self.compiler.compile(dsl, target, resume)
        log_render_result(f"resume {resume.id}", ast)
        return RenderResult(ast=ast, resume_id=resume.id)
