from .generator_client import GenerationResult, GeneratorClient
from .storage import CloudinaryStorage
from .exceptions import (
    exception_handler,
    format_error,
    StudioError,
    NotFoundError,
    OwnershipError,
    ValidationFailure,
    UserNotFoundError,
    ImageNotFoundError,
    ImageNotOwnedError,
    JobNotFoundError,
    HeadshotNotFoundError,
    StyleNotFoundError,
    InvalidStyleSelectionError,
    DuplicateEmailError,
    GenerationError,
)

__all__ = [
    "GenerationResult",
    "GeneratorClient",
    "CloudinaryStorage",
    "exception_handler",
    "format_error",
    "StudioError",
    "NotFoundError",
    "OwnershipError",
    "ValidationFailure",
    "UserNotFoundError",
    "ImageNotFoundError",
    "ImageNotOwnedError",
    "JobNotFoundError",
    "HeadshotNotFoundError",
    "StyleNotFoundError",
    "InvalidStyleSelectionError",
    "DuplicateEmailError",
    "GenerationError",
]
