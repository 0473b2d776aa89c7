"""Custom exceptions for the schema context."""

from typing import List, Optional


class ClientError(Exception):
    """
    Base class for errors caused by the caller's input rather than a defect.

    Attributes:
        message: Error description
        status_code: HTTP-equivalent status for transport layers (400 by default)
    """

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DslValidationError(ClientError):
    """
    Exception raised when a DSL document fails validation.

    Attributes:
        message: Error description
        errors: Individual validation errors ("<path>: <message>")
    """

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)

        parts = [message or "Invalid resume DSL"]
        for error in self.errors[:10]:
            parts.append(f"  - {error}")
        if len(self.errors) > 10:
            parts.append(f"  ... and {len(self.errors) - 10} more errors")

        super().__init__("\n".join(parts))
