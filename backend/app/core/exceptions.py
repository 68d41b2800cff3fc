"""
Custom Exceptions for LeadTrack
===============================

Services raise these; app.core.exception_handlers turns them into
HTTP responses with a stable error code.

Usage:
    from app.core.exceptions import ProfileNotFoundError, ProfileNotAssignedError

    if not profile:
        raise ProfileNotFoundError(profile_id)
"""

from typing import Optional, Any, Dict


class LeadTrackError(Exception):
    """Base exception for all LeadTrack errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(LeadTrackError):
    """User authentication failed"""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="AUTH_FAILED")


class AuthorizationError(LeadTrackError):
    """User not authorized for this action"""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(LeadTrackError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any, message: Optional[str] = None):
        super().__init__(
            message or f"{resource_type} not found",
            code=f"{resource_type.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class ProfileNotFoundError(ResourceNotFoundError):
    def __init__(self, profile_id: int):
        super().__init__("Profile", profile_id)


class AssignmentNotFoundError(ResourceNotFoundError):
    def __init__(self, assignment_id: int):
        super().__init__("Assignment", assignment_id)


class TargetNotFoundError(ResourceNotFoundError):
    def __init__(self, target_id: int):
        super().__init__("Target", target_id)


class LeadEntryNotFoundError(ResourceNotFoundError):
    def __init__(self, entry_id: int):
        super().__init__("Lead entry", entry_id)


class ResumeNotFoundError(ResourceNotFoundError):
    def __init__(self, profile_id: int):
        super().__init__("Resume", profile_id)


class NoProfileAssignedError(ResourceNotFoundError):
    """Lead generation user without an assignment"""

    def __init__(self, user_id: int):
        super().__init__("Assigned profile", user_id, message="No profile assigned")


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(LeadTrackError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class DuplicateUsernameError(ValidationError):
    def __init__(self, username: str):
        super().__init__("Username already exists", field="username")
        self.code = "USERNAME_TAKEN"


class InvalidAssignmentError(ValidationError):
    """Assignment refers to a missing user/profile or a user with the wrong role"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, field=field)
        self.code = "INVALID_ASSIGNMENT"


class ProfileNotAssignedError(ValidationError):
    """Entry submitted for a profile the user is not assigned to"""

    def __init__(self, message: str = "Profile not assigned to this user"):
        super().__init__(message, field="profile_id")
        self.code = "PROFILE_NOT_ASSIGNED"


class InvalidFileTypeError(ValidationError):
    """File type not allowed"""

    def __init__(self, file_type: str, allowed_types: list):
        super().__init__(
            f"File type '{file_type}' not allowed. Allowed: {', '.join(allowed_types)}"
        )
        self.code = "INVALID_FILE_TYPE"
        self.details = {"file_type": file_type, "allowed_types": allowed_types}


class ResumeParseError(ValidationError):
    """PDF could not be read"""

    def __init__(self, message: str = "Failed to parse PDF"):
        super().__init__(message, field="resume_file")
        self.code = "RESUME_PARSE_FAILED"


class FileTooLargeError(LeadTrackError):
    status_code = 413

    def __init__(self, size: int, max_size: int):
        super().__init__(
            f"File exceeds maximum size of {max_size // (1024 * 1024)}MB",
            code="FILE_TOO_LARGE",
            details={"size_bytes": size, "max_size_bytes": max_size}
        )


# ============================================
# Conflict Errors (409-type)
# ============================================

class ConflictError(LeadTrackError):
    """Operation would break referential integrity"""

    status_code = 409

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFLICT", details=details)


# ============================================
# Report Errors
# ============================================

class ReportGenerationError(LeadTrackError):
    """Report rendering failed"""

    def __init__(self, message: str, report_type: Optional[str] = None):
        super().__init__(message, code="REPORT_GENERATION_FAILED")
        if report_type:
            self.details["report_type"] = report_type


def error_response(error: LeadTrackError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "detail": error.message,
        "error": error.to_dict()
    }
