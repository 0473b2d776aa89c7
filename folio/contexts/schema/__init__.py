"""
Schema Context

Responsibilities:
- Defines the versioned resume DSL document model
- Validates raw documents and reports structured errors
- Reorders sections without mutating the source document

Owns: DSL document shape, validation rules, current schema version
Never: Resolves tokens or builds layout
"""

from folio.contexts.schema.dsl_data_structure import (
    CURRENT_DSL_VERSION,
    DesignTokens,
    ItemOverride,
    LayoutConfig,
    ResumeDsl,
    SectionConfig,
)
from folio.contexts.schema.exceptions import ClientError, DslValidationError
from folio.contexts.schema.section_ordering import move_section
from folio.contexts.schema.validator import (
    ValidationResult,
    is_supported_version,
    validate,
    validate_or_throw,
)

__all__ = [
    # Document model
    "CURRENT_DSL_VERSION",
    "ResumeDsl",
    "LayoutConfig",
    "DesignTokens",
    "SectionConfig",
    "ItemOverride",
    # Validation
    "ValidationResult",
    "validate",
    "validate_or_throw",
    "is_supported_version",
    # Reordering
    "move_section",
    # Errors
    "ClientError",
    "DslValidationError",
]
