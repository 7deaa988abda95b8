"""Service layer for the `studio` Django app.

Views and Celery tasks go through these functions; they own every write to the
generation tables.
"""

from .intake import create_user, register_image_upload
from .orchestrator import (
    create_generation_job,
    finalize_job_if_done,
    reconcile_processing_jobs,
    start_generation_job,
    update_job_status,
)
from .queries import (
    list_active_style_options,
    list_job_headshots,
    list_user_jobs,
    list_user_selected_headshots,
)
from .selection import select_headshot
from .validation import validate_job_request

__all__ = [
    "create_user",
    "register_image_upload",
    "create_generation_job",
    "finalize_job_if_done",
    "reconcile_processing_jobs",
    "start_generation_job",
    "update_job_status",
    "list_active_style_options",
    "list_job_headshots",
    "list_user_jobs",
    "list_user_selected_headshots",
    "select_headshot",
    "validate_job_request",
]
