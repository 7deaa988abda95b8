from .generation import dispatch_generation_job, generate_headshot
from .maintenance import reconcile_generation_jobs

__all__ = [
    "dispatch_generation_job",
    "generate_headshot",
    "reconcile_generation_jobs",
]
