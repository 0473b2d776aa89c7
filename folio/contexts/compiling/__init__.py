"""
Compiling Context

Responsibilities:
- Resolves design token selections into concrete values
- Builds page geometry and the column set
- Compiles stored resume records into tagged section data
- Assembles the renderer-ready AST

Owns: Token tables, AST shape, section data shapes
Never: Reads storage or draws output
"""

from folio.contexts.compiling.ast_data_structure import ResumeAst
from folio.contexts.compiling.compiler import DslCompiler, create_compiler
from folio.contexts.compiling.layout_builder import build_page_layout
from folio.contexts.compiling.overrides import apply_overrides
from folio.contexts.compiling.resume_data_structure import ResumeRecord
from folio.contexts.compiling.section_compilers import compile_section_data, get_placeholder_data
from folio.contexts.compiling.section_styles import build_section_styles
from folio.contexts.compiling.token_resolver import ResolvedTokens, resolve_tokens

__all__ = [
    "DslCompiler",
    "create_compiler",
    "ResumeAst",
    "ResumeRecord",
    "ResolvedTokens",
    "resolve_tokens",
    "build_page_layout",
    "build_section_styles",
    "apply_overrides",
    "compile_section_data",
    "get_placeholder_data",
]
