"""
DSL validation.

Checks a raw document against the current schema: presence of ``version``,
structural conformance of layout/tokens/sections/itemOverrides against their
enumerated value sets, uniqueness of section ids and the section count limit.

``validate`` reports failures as data and never raises; ``validate_or_throw``
converts failures into a DslValidationError carrying the same error list.
"""

import os
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from folio.contexts.schema.dsl_data_structure import CURRENT_DSL_VERSION, ResumeDsl
from folio.contexts.schema.exceptions import DslValidationError
from folio.contexts.schema.logger import log_validation_failure

load_dotenv()
MAX_SECTIONS = int(os.getenv("FOLIO_MAX_SECTIONS", "50"))


@dataclass
class ValidationResult:
    """
    Result of DSL validation.

    Attributes:
        valid: Whether the document passed every check
        errors: Validation errors as "<path>: <message>" strings
        normalized: Typed document (only when valid)
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    normalized: Optional[ResumeDsl] = None


def format_validation_errors(error: PydanticValidationError) -> List[str]:
    """Flatten pydantic errors into "<dotted.path>: <message>" strings."""
    messages = []
    for detail in error.errors():
        path = ".".join(str(part) for part in detail["loc"]) or "document"
        message = "Required" if detail["type"] == "missing" else detail["msg"]
        messages.append(f"{path}: {message}")
    return messages


def _check_sections(dsl: ResumeDsl) -> List[str]:
    """Cross-field checks the models cannot express on their own."""
    errors = []

    if len(dsl.sections) > MAX_SECTIONS:
        errors.append(
            f"sections: At most {MAX_SECTIONS} sections are allowed (got {len(dsl.sections)})"
        )

    for section_id, count in Counter(dsl.section_ids()).items():
        if count > 1:
            errors.append(f"sections: Duplicate section id '{section_id}'")

    for section_id, overrides in dsl.item_overrides.items():
        item_counts = Counter(override.item_id for override in overrides)
        for item_id, count in item_counts.items():
            if count > 1:
                errors.append(
                    f"itemOverrides.{section_id}: Duplicate override for item '{item_id}'"
                )

    return errors


def validate(raw: Any) -> ValidationResult:
    """
    Validate a raw document without raising.

    Args:
        raw: Untyped document (mapping) or an already-typed ResumeDsl

    Returns:
        ValidationResult with errors, or the typed document when valid

    Example:
        >>> result = validate({"layout": {...}, "tokens": {}, "sections": []})
        >>> result.errors
        ['version: Required']
    """
    if isinstance(raw, ResumeDsl):
        raw = raw.to_document()

    try:
        dsl = ResumeDsl.model_validate(raw)
    except PydanticValidationError as e:
        errors = format_validation_errors(e)
        log_validation_failure(errors)
        return ValidationResult(valid=False, errors=errors)

    errors = _check_sections(dsl)
    if errors:
        log_validation_failure(errors)
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(valid=True, normalized=dsl)


def validate_or_throw(raw: Any) -> ResumeDsl:
    """
    Validate a raw document and return it typed.

    Raises:
        DslValidationError: If the document fails any check
    """
    result = validate(raw)
    if not result.valid:
        raise DslValidationError(result.errors)
    return result.normalized


def is_supported_version(version: str) -> bool:
    """True when documents at this version compile without migration."""
    return version == CURRENT_DSL_VERSION
