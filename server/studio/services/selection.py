import logging

from django.db import transaction

from studio.models import GeneratedHeadshot, GenerationJob
from studio.utils.exceptions import HeadshotNotFoundError

logger = logging.getLogger(__name__)


def select_headshot(user_id, headshot_id):
    """
    Mark one headshot as the accepted result of its job.

    Ownership is proven through the parent job. Clearing the previous selection
    and setting the new one happen in one transaction while the job row is
    locked, so concurrent selections within a job serialize and the last one
    to commit wins. Headshot status is not checked here.
    """
    try:
        headshot = GeneratedHeadshot.objects.get(
            id=headshot_id,
            generation_job__user_id=user_id,
        )
    except GeneratedHeadshot.DoesNotExist:
        raise HeadshotNotFoundError(headshot_id)

    with transaction.atomic():
        GenerationJob.objects.select_for_update().get(id=headshot.generation_job_id)
        GeneratedHeadshot.objects.filter(
            generation_job_id=headshot.generation_job_id,
            is_selected=True,
        ).update(is_selected=False)
        GeneratedHeadshot.objects.filter(id=headshot.id).update(is_selected=True)

    headshot.refresh_from_db()
    logger.info(f"User {user_id} selected headshot {headshot_id} for job {headshot.generation_job_id}")
    return headshot
