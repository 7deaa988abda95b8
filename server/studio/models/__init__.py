"""Database models exposed by the `studio` Django app.

This package aggregates model classes to provide a convenient import surface
for other parts of the backend.
"""

from .generation import GeneratedHeadshot, GenerationJob
from .style import StyleOption
from .upload import ImageUpload
from .user import User

__all__ = [
    "GeneratedHeadshot",
    "GenerationJob",
    "ImageUpload",
    "StyleOption",
    "User",
]
