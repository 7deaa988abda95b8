from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler


def exception_handler(exc, context):
    """
    Custom exception handler for DRF that returns consistent error format.

    Domain errors raised by the services (`StudioError`) are rendered with the
    same envelope as DRF's own exceptions.
    """
    if isinstance(exc, StudioError):
        return Response(
            format_error(code=exc.code, message=str(exc), details=exc.details),
            status=exc.status_code,
        )

    response = drf_exception_handler(exc, context)

    if response:
        response.data = format_error(
            code=getattr(exc, "default_code", "error"),
            message=str(exc),
            details=(
                response.data
                if isinstance(response.data, dict)
                else {"detail": response.data}
            ),
        )

    return response


def format_error(code: str, message: str, details=None):
    return {
        "error": {
            "code": str(code).upper(),
            "message": message,
            "details": details if details is not None else {},
        }
    }


class StudioError(Exception):
    """Base class for errors surfaced to API callers"""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message, details=None):
        self.details = details or {}
        super().__init__(message)


class NotFoundError(StudioError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class OwnershipError(StudioError):
    code = "ownership"
    status_code = status.HTTP_403_FORBIDDEN


class ValidationFailure(StudioError):
    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFoundError(NotFoundError):
    """Raised when a referenced user does not exist"""
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found", {"user_id": user_id})


class ImageNotFoundError(NotFoundError):
    """Raised when a referenced image upload does not exist"""
    def __init__(self, image_upload_id):
        self.image_upload_id = image_upload_id
        super().__init__(
            f"Image upload with id {image_upload_id} not found",
            {"image_upload_id": image_upload_id},
        )


class JobNotFoundError(NotFoundError):
    """Raised when a generation job does not exist"""
    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__(f"Generation job with id {job_id} not found", {"job_id": job_id})


class HeadshotNotFoundError(NotFoundError):
    """Raised when a headshot does not exist or its job belongs to another user"""
    def __init__(self, headshot_id):
        self.headshot_id = headshot_id
        super().__init__(
            "Headshot not found or does not belong to user",
            {"headshot_id": headshot_id},
        )


class ImageNotOwnedError(OwnershipError):
    """Raised when an image upload belongs to a different user"""
    def __init__(self, image_upload_id, user_id):
        self.image_upload_id = image_upload_id
        self.user_id = user_id
        super().__init__(
            f"Image upload {image_upload_id} does not belong to user {user_id}",
            {"image_upload_id": image_upload_id, "user_id": user_id},
        )


class StyleNotFoundError(ValidationFailure):
    """Raised when requested style options are missing or inactive"""
    code = "style_not_found"

    def __init__(self, missing_ids):
        self.missing_ids = list(missing_ids)
        super().__init__(
            f"Style options not found: {', '.join(str(i) for i in self.missing_ids)}",
            {"missing_ids": self.missing_ids},
        )


class InvalidStyleSelectionError(ValidationFailure):
    """Raised when the style list is empty, too long or has duplicates"""
    code = "invalid_style_selection"


class DuplicateEmailError(ValidationFailure):
    """Raised when creating a user with an email that is already registered"""
    code = "duplicate_email"

    def __init__(self, email):
        self.email = email
        super().__init__(f"A user with email {email} already exists", {"email": email})


class GenerationError(Exception):
    """Raised by the generator client when a remote task does not succeed"""
