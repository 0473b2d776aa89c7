"""
DSL to AST compilation.

Runs the full pipeline for one document:

    migrate (if stale) -> validate -> resolve tokens -> page layout
    -> place visible sections (data + styles) -> meta and global styles

The pipeline is the same for every target; the target is recorded on the AST
for renderers. Compiling the same input twice yields an identical AST.
"""

from typing import Any, List, Optional

from folio.contexts.compiling.ast_data_structure import (
    AstMeta,
    GlobalStyles,
    PlacedSection,
    ResumeAst,
)
from folio.contexts.compiling.layout_builder import build_page_layout, map_column_to_id
from folio.contexts.compiling.logger import log_compile_result, log_compile_start
from folio.contexts.compiling.resume_data_structure import ResumeRecord
from folio.contexts.compiling.section_compilers import compile_section_data, get_placeholder_data
from folio.contexts.compiling.section_styles import build_section_styles
from folio.contexts.compiling.token_resolver import ResolvedTokens, resolve_tokens
from folio.contexts.migration import MigrationEngine, create_migration_engine
from folio.contexts.schema import (
    CURRENT_DSL_VERSION,
    DslValidationError,
    ResumeDsl,
    validate_or_throw,
)

SUPPORTED_TARGETS = ("html", "pdf")


class DslCompiler:
    """
    Compiles resume DSL documents into renderer-ready ASTs.

    Args:
        migration_engine: Engine used to upgrade stale documents (defaults to
            one wired with the built-in migrators)

    Example:
        >>> compiler = create_compiler()
        >>> ast = compiler.compile_for_pdf(dsl, resume=record)
        >>> [s.section_id for s in ast.sections]
        ['summary', 'experience', 'skills']
    """

    def __init__(self, migration_engine: Optional[MigrationEngine] = None):
        self.migration_engine = migration_engine or create_migration_engine()

    def compile(
        self, dsl: ResumeDsl, target: str = "html", resume: Optional[ResumeRecord] = None
    ) -> ResumeAst:
        """
        Compile a document into an AST.

        Args:
            dsl: Typed document, at the current version or an older one
            target: "html" or "pdf"
            resume: Stored records to fill sections with (placeholders when None)

        Returns:
            ResumeAst

        Raises:
            DslValidationError: Unsupported target, or the migrated document is invalid
            MigrationError: The document cannot be upgraded to the current version
        """
        if target not in SUPPORTED_TARGETS:
            raise DslValidationError(
                [f"target: Must be one of {', '.join(SUPPORTED_TARGETS)} (got '{target}')"]
            )

        if dsl.version != CURRENT_DSL_VERSION:
            dsl = self.migration_engine.migrate(dsl, CURRENT_DSL_VERSION)
        dsl = validate_or_throw(dsl)

        log_compile_start(dsl.version, target, len(dsl.sections), resume is not None)

        tokens = resolve_tokens(dsl.tokens)
        ast = ResumeAst(
            meta=AstMeta(version=dsl.version, target=target),
            page=build_page_layout(dsl, tokens),
            sections=self._place_sections(dsl, tokens, resume),
            global_styles=GlobalStyles(
                background=tokens.colors.background,
                text_primary=tokens.colors.text_primary,
                text_secondary=tokens.colors.text_secondary,
                accent=tokens.colors.primary,
            ),
        )

        log_compile_result(ast)
        return ast

    def compile_for_html(self, dsl: ResumeDsl, resume: Optional[ResumeRecord] = None) -> ResumeAst:
        return self.compile(dsl, "html", resume)

    def compile_for_pdf(self, dsl: ResumeDsl, resume: Optional[ResumeRecord] = None) -> ResumeAst:
        return self.compile(dsl, "pdf", resume)

    def compile_from_raw(self, raw: Any, target: str = "html") -> ResumeAst:
        """
        Validate an untyped document, then compile it with placeholder data.

        Raises:
            DslValidationError: If the document fails validation
        """
        return self.compile(validate_or_throw(raw), target)

    def _place_sections(
        self, dsl: ResumeDsl, tokens: ResolvedTokens, resume: Optional[ResumeRecord]
    ) -> List[PlacedSection]:
        styles = build_section_styles(tokens)
        visible = sorted(
            (section for section in dsl.sections if section.visible),
            key=lambda section: section.order,
        )

        placed = []
        for section in visible:
            if resume is not None:
                data = compile_section_data(section.id, resume, dsl.overrides_for(section.id))
            else:
                data = get_placeholder_data(section.id)

            placed.append(
                PlacedSection(
                    section_id=section.id,
                    column_id=map_column_to_id(section.column),
                    order=section.order,
                    data=data,
                    styles=styles,
                )
            )
        return placed


def create_compiler(migration_engine: Optional[MigrationEngine] = None) -> DslCompiler:
    """Build a compiler wired with the given (or built-in) migration engine."""
    return DslCompiler(migration_engine=migration_engine)
