from celery import shared_task
from studio.services.orchestrator import reconcile_processing_jobs
import logging

logger = logging.getLogger(__name__)


@shared_task
def reconcile_generation_jobs():
    """
    Periodic task finishing processing jobs whose headshots are all terminal.

    Covers a worker dying between writing the last headshot and running the
    job aggregation.
    """
    count = reconcile_processing_jobs()
    logger.info(f"Reconciled {count} generation jobs")
    return count
