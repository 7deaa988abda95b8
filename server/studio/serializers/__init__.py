"""Serializer package for the `studio` Django app.

This package re-exports the public DRF serializer classes used by views.
"""

from .catalog import (
    CreateUserSerializer,
    ImageUploadSerializer,
    StyleOptionSerializer,
    UploadImageSerializer,
    UserSerializer,
)
from .generation import (
    CreateGenerationJobSerializer,
    GeneratedHeadshotSerializer,
    GenerationJobSerializer,
    SelectHeadshotSerializer,
    UpdateJobStatusSerializer,
    UserJobsQuerySerializer,
)

__all__ = [
    "CreateUserSerializer",
    "ImageUploadSerializer",
    "StyleOptionSerializer",
    "UploadImageSerializer",
    "UserSerializer",
    "CreateGenerationJobSerializer",
    "GeneratedHeadshotSerializer",
    "GenerationJobSerializer",
    "SelectHeadshotSerializer",
    "UpdateJobStatusSerializer",
    "UserJobsQuerySerializer",
]
