"""Custom exceptions for the rendering context."""

from typing import Optional

from folio.contexts.schema.exceptions import ClientError


class ResumeNotFoundError(ClientError):
    """
    Raised when a resume does not exist, or is not visible to the caller.

    Attributes:
        resume_id: Requested resume id (None for slug lookups)
        slug: Requested public slug (None for id lookups)
    """

    status_code = 404

    def __init__(self, resume_id: Optional[str] = None, slug: Optional[str] = None):
        self.resume_id = resume_id
        self.slug = slug
        if slug is not None:
            message = f"No public resume with slug '{slug}'"
        else:
            message = f"Resume '{resume_id}' not found"
        super().__init__(message)


class ResumeForbiddenError(ClientError):
    """
    Raised when a resume exists but belongs to another user.

    Attributes:
        resume_id: Requested resume id
        user_id: Requesting user
    """

    status_code = 403

    def __init__(self, resume_id: str, user_id: str):
        self.resume_id = resume_id
        self.user_id = user_id
        super().__init__(f"User '{user_id}' may not access resume '{resume_id}'")
