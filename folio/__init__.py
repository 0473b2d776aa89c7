"""
Folio - Resume DSL compiler and schema migration engine

Compiles a versioned, declarative resume document (layout, design-token
selections, section ordering and visibility) into a renderer-ready AST.

Architecture:
- Schema Context: DSL data model, validation, section reordering
- Migration Context: Versioned schema upgrades across registered migrators
- Compiling Context: Token resolution, page layout, section compilation, AST assembly
- Rendering Context: Storage lookup, theme merging, render orchestration
"""

__version__ = "0.1.0"
