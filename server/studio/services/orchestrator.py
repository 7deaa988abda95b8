"""Generation job orchestration.

Job lifecycle:

    pending --dispatch--> processing --all headshots terminal--> completed | failed
    pending --scheduling failure--> failed

Only this module moves a job between states. Generation tasks write their own
headshot row and then call `finalize_job_if_done`, which re-reads every sibling
headshot while holding the job row lock before deciding the job outcome.
"""

import logging

from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from studio.models import GeneratedHeadshot, GenerationJob
from studio.utils.exceptions import JobNotFoundError, ValidationFailure
from .validation import validate_job_request

logger = logging.getLogger(__name__)

UNSET = object()

STYLE_DEACTIVATED_MESSAGE = "Style option was deactivated before generation started"
NO_ACTIVE_STYLES_MESSAGE = "Scheduling failed: no active style options left to generate"


def _generation_tasks():
    # studio.tasks imports this module
    from studio.tasks import generation
    return generation


def _lock_job(job_id):
    try:
        return GenerationJob.objects.select_for_update().get(id=job_id)
    except GenerationJob.DoesNotExist:
        raise JobNotFoundError(job_id)


def create_generation_job(user_id, image_upload_id, style_option_ids):
    """
    Validate a submission, persist the job with its headshot placeholders and
    enqueue its dispatch.

    The job is returned as soon as it is stored; generation happens in Celery
    workers. If the dispatch cannot be enqueued the returned job is already
    `failed`.
    """
    user, image_upload, styles = validate_job_request(user_id, image_upload_id, style_option_ids)

    with transaction.atomic():
        job = GenerationJob.objects.create(
            user=user,
            image_upload=image_upload,
            style_option_ids=list(style_option_ids),
            status='pending',
        )
        GeneratedHeadshot.objects.bulk_create([
            GeneratedHeadshot(generation_job=job, style_option=style)
            for style in styles
        ])

    logger.info(f"Created generation job {job.id} for user {user.id} with {len(styles)} styles")

    try:
        _generation_tasks().dispatch_generation_job.delay(job.id)
    except Exception as exc:
        logger.exception(f"Could not enqueue dispatch for job {job.id}: {exc}")
        job = fail_job_for_scheduling(job.id, f"Scheduling failed: {exc}")

    return job


def fail_job_for_scheduling(job_id, message, headshot_ids=None):
    """
    Mark a job failed because its tasks could not be dispatched.

    Pending headshots (restricted to `headshot_ids` when given) are failed with
    the same message so no placeholder is left waiting for a task that will
    never run.
    """
    with transaction.atomic():
        job = _lock_job(job_id)
        pending = job.headshots.filter(generation_status='pending')
        if headshot_ids is not None:
            pending = pending.filter(id__in=headshot_ids)
        pending.update(generation_status='failed', error_message=message)

        job.status = 'failed'
        job.error_message = message
        job.completed_at = timezone.now()
        job.save(update_fields=['status', 'error_message', 'completed_at'])

    logger.error(f"Job {job_id} failed to schedule: {message}")
    return job


def start_generation_job(job_id):
    """
    Move a pending job to processing and enqueue one task per headshot.

    Headshots whose style was deactivated since the job was created are failed
    up front; a job left with nothing to generate fails as a scheduling failure.
    Calling this for a job that is no longer pending is a no-op.
    """
    with transaction.atomic():
        job = _lock_job(job_id)
        if job.status != 'pending':
            logger.info(f"Job {job_id} is {job.status}, nothing to dispatch")
            return job

        headshots = list(
            job.headshots.select_related('style_option').filter(generation_status='pending')
        )
        deactivated = [h.id for h in headshots if not h.style_option.is_active]
        to_dispatch = [h.id for h in headshots if h.style_option.is_active]

        if deactivated:
            GeneratedHeadshot.objects.filter(
                id__in=deactivated,
                generation_status='pending',
            ).update(generation_status='failed', error_message=STYLE_DEACTIVATED_MESSAGE)
            logger.warning(f"Job {job_id}: {len(deactivated)} styles deactivated before dispatch")

        if not to_dispatch:
            job.status = 'failed'
            job.error_message = NO_ACTIVE_STYLES_MESSAGE
            job.completed_at = timezone.now()
            job.save(update_fields=['status', 'error_message', 'completed_at'])
            logger.error(f"Job {job_id} failed: {NO_ACTIVE_STYLES_MESSAGE}")
            return job

        job.status = 'processing'
        job.save(update_fields=['status'])

    logger.info(f"Dispatching {len(to_dispatch)} generation tasks for job {job_id}")

    tasks = _generation_tasks()
    dispatched = []
    try:
        for headshot_id in to_dispatch:
            tasks.generate_headshot.delay(job.id, headshot_id)
            dispatched.append(headshot_id)
    except Exception as exc:
        logger.exception(f"Could not enqueue generation task for job {job_id}: {exc}")
        undispatched = [h for h in to_dispatch if h not in dispatched]
        return fail_job_for_scheduling(job.id, f"Scheduling failed: {exc}", undispatched)

    return job


def summarize_failures(headshots):
    """Build the job error message from its failed headshots."""
    failed = [h for h in headshots if h.generation_status == 'failed']
    if not failed:
        return "No headshots were generated"

    parts = [
        f"{h.style_option.name} (style {h.style_option_id}): {h.error_message or 'unknown error'}"
        for h in failed
    ]
    return f"All {len(failed)} styles failed: " + "; ".join(parts)


def finalize_job_if_done(job_id):
    """
    Decide the job outcome once every headshot has reached a terminal state.

    Runs under the job row lock and re-reads all sibling headshots, so two
    tasks finishing at the same time cannot both (or neither) complete the job.
    Jobs that are not processing are returned untouched.
    """
    with transaction.atomic():
        job = _lock_job(job_id)
        if job.status != 'processing':
            return job

        headshots = list(job.headshots.select_related('style_option').order_by('id'))
        if any(h.generation_status == 'pending' for h in headshots):
            return job

        succeeded = sum(1 for h in headshots if h.generation_status == 'completed')
        job.completed_at = timezone.now()
        if succeeded:
            job.status = 'completed'
            job.save(update_fields=['status', 'completed_at'])
        else:
            job.status = 'failed'
            job.error_message = summarize_failures(headshots)
            job.save(update_fields=['status', 'error_message', 'completed_at'])

    logger.info(f"Job {job_id} {job.status}: {succeeded}/{len(headshots)} headshots generated")
    return job


def update_job_status(job_id, status, error_message=UNSET):
    """
    Manually override a job's status.

    `completed`/`failed` stamp the completion time, `pending`/`processing`
    clear it. `error_message` is stored verbatim when passed (including None)
    and left untouched when omitted.
    """
    valid_statuses = [choice for choice, _ in GenerationJob.STATUS_CHOICES]
    if status not in valid_statuses:
        raise ValidationFailure(
            f"Invalid job status: {status}",
            {"allowed": valid_statuses},
        )

    with transaction.atomic():
        job = _lock_job(job_id)
        job.status = status
        job.completed_at = timezone.now() if status in GenerationJob.TERMINAL_STATUSES else None
        update_fields = ['status', 'completed_at']
        if error_message is not UNSET:
            job.error_message = error_message
            update_fields.append('error_message')
        job.save(update_fields=update_fields)

    logger.info(f"Job {job_id} status manually set to {status}")
    return job


def fail_stale_headshots(job_id, stale_before):
    """Fail pending headshots of a job created before `stale_before`. Returns how many."""
    stale_after = settings.GENERATION_STALE_AFTER_SECONDS
    return GeneratedHeadshot.objects.filter(
        generation_job_id=job_id,
        generation_status='pending',
        created_at__lt=stale_before,
    ).update(
        generation_status='failed',
        error_message=f"Generation did not finish within {stale_after} seconds",
    )


def reconcile_processing_jobs():
    """
    Finish processing jobs a worker left behind.

    Pending headshots older than `GENERATION_STALE_AFTER_SECONDS` are failed
    (their task was lost), then aggregation is re-run. Returns how many jobs
    finished.
    """
    finished = 0
    stale_before = timezone.now() - timedelta(seconds=settings.GENERATION_STALE_AFTER_SECONDS)
    job_ids = list(
        GenerationJob.objects.filter(status='processing').values_list('id', flat=True)
    )
    for job_id in job_ids:
        stale = fail_stale_headshots(job_id, stale_before)
        if stale:
            logger.warning(f"Job {job_id}: failed {stale} headshots stuck in pending")
        job = finalize_job_if_done(job_id)
        if job.is_terminal:
            finished += 1
    return finished
