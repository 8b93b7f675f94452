"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401/403)
    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN_FORMAT = "INVALID_TOKEN_FORMAT"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELDS = "MISSING_FIELDS"
    MISSING_CONTENT = "MISSING_CONTENT"
    MISSING_RECIPIENT = "MISSING_RECIPIENT"
    INVALID_RECIPIENT = "INVALID_RECIPIENT"
    INVALID_STATUS = "INVALID_STATUS"
    INVALID_JOB_ID = "INVALID_JOB_ID"
    MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    NO_UPDATE_FIELDS = "NO_UPDATE_FIELDS"

    # Authorization errors (403)
    UNAUTHORIZED_UPDATE = "UNAUTHORIZED_UPDATE"
    UNAUTHORIZED_ACCESS = "UNAUTHORIZED_ACCESS"
    UNAUTHORIZED_PROFILE_ACCESS = "UNAUTHORIZED_PROFILE_ACCESS"
    UNAUTHORIZED_JOB_ACCESS = "UNAUTHORIZED_JOB_ACCESS"
    UNAUTHORIZED_EVENT_ACCESS = "UNAUTHORIZED_EVENT_ACCESS"

    # Not found errors (404)
    MENTOR_NOT_FOUND = "MENTOR_NOT_FOUND"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    JOB_NOT_FOUND = "JOB_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"

    # Conflict errors (400/409)
    REQUEST_EXISTS = "REQUEST_EXISTS"
    REQUEST_ALREADY_DECIDED = "REQUEST_ALREADY_DECIDED"
    PROFILE_EXISTS = "PROFILE_EXISTS"
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


# --- Taxonomy ---


class AuthenticationError(AppException):
    """Missing, malformed, invalid or expired bearer token."""

    def __init__(
        self,
        message: str = "Unauthorized: No token provided",
        error_code: ErrorCode = ErrorCode.NO_TOKEN,
        status_code: int = 401,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status_code,
        )


class ValidationError(AppException):
    """A required field is missing or a value is not allowed."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class AuthorizationError(AppException):
    """Authenticated caller acting outside their permitted scope."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=403,
            details=details,
        )


class NotFoundError(AppException):
    """A referenced entity does not exist."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class ConflictError(AppException):
    """The operation would violate a uniqueness or lifecycle rule."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status_code,
            details=details,
        )


class StoreError(AppException):
    """Underlying persistence failure."""

    def __init__(self, message: str = "A database error occurred") -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
            status_code=500,
        )


# --- Mentorship ---


class MissingFieldsError(ValidationError):
    """Mentor ID or area missing from a mentorship request."""

    def __init__(self, message: str = "Mentor ID and area are required") -> None:
        super().__init__(ErrorCode.MISSING_FIELDS, message)


class InvalidStatusError(ValidationError):
    """Requested status is not a valid transition target."""

    def __init__(self, status: str | None) -> None:
        super().__init__(
            ErrorCode.INVALID_STATUS,
            "Invalid status",
            details={"status": status, "allowed": ["accepted", "rejected"]},
        )


class MentorNotFoundError(NotFoundError):
    """No mentor profile for the given identity."""

    def __init__(self, mentor_id: str) -> None:
        super().__init__(
            ErrorCode.MENTOR_NOT_FOUND,
            "Mentor not found",
            details={"mentor_id": mentor_id},
        )


class RequestNotFoundError(NotFoundError):
    """Mentorship request not found."""

    def __init__(self, request_id: str) -> None:
        super().__init__(
            ErrorCode.REQUEST_NOT_FOUND,
            "Request not found",
            details={"request_id": request_id},
        )


class RequestExistsError(ConflictError):
    """An open request already exists for this mentor and student."""

    def __init__(self, status: str) -> None:
        message = "Pending request exists" if status == "pending" else "Already mentored"
        super().__init__(
            ErrorCode.REQUEST_EXISTS,
            message,
            details={"status": status},
        )


class RequestAlreadyDecidedError(ConflictError):
    """The request was already accepted or rejected."""

    def __init__(self, status: str) -> None:
        super().__init__(
            ErrorCode.REQUEST_ALREADY_DECIDED,
            f"Request has already been {status}",
            details={"status": status},
        )


class UnauthorizedUpdateError(AuthorizationError):
    """Only the addressed mentor may decide a request."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.UNAUTHORIZED_UPDATE,
            "Unauthorized: Only mentor can update",
        )


# --- Messaging ---


class MissingRecipientError(ValidationError):
    """Recipient ID missing when starting a conversation."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.MISSING_RECIPIENT, "Recipient ID required")


class InvalidRecipientError(ValidationError):
    """A conversation needs two distinct participants."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.INVALID_RECIPIENT,
            "Cannot start a conversation with yourself",
        )


class MissingContentError(ValidationError):
    """Message content missing or blank."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.MISSING_CONTENT, "Message content is required")


class UnauthorizedAccessError(AuthorizationError):
    """Caller is not a participant of the conversation (or it does not exist)."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.UNAUTHORIZED_ACCESS,
            "Unauthorized: Not a participant",
        )


# --- Profiles ---


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            ErrorCode.PROFILE_NOT_FOUND,
            "Alumni not found",
            details={"user_id": user_id},
        )


class ProfileExistsError(ConflictError):
    """A profile already exists for this identity."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            ErrorCode.PROFILE_EXISTS,
            "Alumni profile already exists",
            details={"user_id": user_id},
        )


class EmailTakenError(ConflictError):
    """Another profile already uses this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            ErrorCode.EMAIL_TAKEN,
            "Email is already used by another profile",
            status_code=409,
            details={"email": email},
        )


class UnauthorizedProfileAccessError(AuthorizationError):
    """Caller tried to write someone else's profile."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.UNAUTHORIZED_PROFILE_ACCESS,
            "Unauthorized: You can only modify your own profile",
        )


# --- Jobs ---


class InvalidJobIdError(ValidationError):
    """The job ID is not a well-formed identifier."""

    def __init__(self, job_id: str) -> None:
        super().__init__(
            ErrorCode.INVALID_JOB_ID,
            "Invalid job ID",
            details={"job_id": job_id},
        )


class MissingDescriptionError(ValidationError):
    """Job description missing or blank."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.MISSING_DESCRIPTION, "Description is required")


class NoUpdateFieldsError(ValidationError):
    """A job update carried neither a description nor complete media."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.NO_UPDATE_FIELDS,
            "At least one field (description or media) must be provided",
        )


class JobNotFoundError(NotFoundError):
    """Job posting not found."""

    def __init__(self, job_id: str) -> None:
        super().__init__(
            ErrorCode.JOB_NOT_FOUND,
            "Job not found",
            details={"job_id": job_id},
        )


class UnauthorizedJobAccessError(AuthorizationError):
    """Only the poster may change or remove a job."""

    def __init__(self, action: str) -> None:
        super().__init__(
            ErrorCode.UNAUTHORIZED_JOB_ACCESS,
            f"Not authorized to {action} this job",
        )


# --- Events ---


class InvalidDescriptionError(ValidationError):
    """Event description shorter than the minimum length."""

    def __init__(self, min_length: int) -> None:
        super().__init__(
            ErrorCode.INVALID_DESCRIPTION,
            f"Description must be at least {min_length} characters long",
            details={"min_length": min_length},
        )


class EventNotFoundError(NotFoundError):
    """Event not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            ErrorCode.EVENT_NOT_FOUND,
            "Event not found",
            details={"event_id": event_id},
        )


class UnauthorizedEventAccessError(AuthorizationError):
    """Only the organizer may remove an event."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.UNAUTHORIZED_EVENT_ACCESS,
            "Unauthorized: Only the event organizer can delete this event",
        )
