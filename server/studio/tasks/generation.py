from celery import shared_task
from django.conf import settings
from studio.services import orchestrator
from studio.services.generation import run_generation_task
from studio.utils.exceptions import JobNotFoundError
import logging

logger = logging.getLogger(__name__)


@shared_task
def dispatch_generation_job(job_id):
    """
    Fan a pending job out into one `generate_headshot` task per style.
    """
    try:
        job = orchestrator.start_generation_job(job_id)
    except JobNotFoundError:
        logger.error(f"GenerationJob {job_id} not found")
        return None

    return job.status


@shared_task(rate_limit=getattr(settings, 'GENERATION_TASK_RATE_LIMIT', None) or None)
def generate_headshot(job_id, headshot_id):
    """
    Generate one headshot, then let the orchestrator re-evaluate the job.

    Steps:
    1. Run the generation for the headshot (writes only the headshot row)
    2. Report to the orchestrator, which completes or fails the job once
       every sibling headshot is terminal
    """
    headshot_status = run_generation_task(headshot_id)

    try:
        job = orchestrator.finalize_job_if_done(job_id)
    except JobNotFoundError:
        logger.error(f"GenerationJob {job_id} not found while finalizing headshot {headshot_id}")
        return {"headshot_id": headshot_id, "status": headshot_status, "job_status": None}

    return {"headshot_id": headshot_id, "status": headshot_status, "job_status": job.status}
