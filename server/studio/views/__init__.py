from studio.views.api_root import api_root
from studio.views.catalog import list_style_options, upload_image
from studio.views.headshots import select_headshot
from studio.views.health import health_check
from studio.views.jobs import create_generation_job, job_headshots, update_job_status
from studio.views.users import create_user, user_jobs, user_selected_headshots

__all__ = [
    "api_root",
    "list_style_options",
    "upload_image",
    "select_headshot",
    "health_check",
    "create_generation_job",
    "job_headshots",
    "update_job_status",
    "create_user",
    "user_jobs",
    "user_selected_headshots",
]
