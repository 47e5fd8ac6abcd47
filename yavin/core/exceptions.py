"""
Error taxonomy shared by services and API routes.

Services raise these; ``yavin.main`` turns them into structured
``{"success": false, "error": ..., "code": ...}`` responses.
"""
from typing import Any, Dict, Optional

from fastapi import status


class YavinError(Exception):
    """Base class for errors reported back to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_payload(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, "code": self.code}


class ValidationFailed(YavinError):
    """Bad input shape."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class InvalidSection(ValidationFailed):
    """Section id is not part of the curriculum."""

    code = "INVALID_SECTION"

    def __init__(self, section_id: str):
        super().__init__(f"Invalid section ID: {section_id}")
        self.section_id = section_id


class AuthenticationFailed(YavinError):
    """Bad credentials or missing session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"


class ConflictError(YavinError):
    """Resource already exists."""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
