from studio.models import GeneratedHeadshot, GenerationJob, StyleOption


def list_active_style_options():
    return StyleOption.objects.filter(is_active=True).order_by('id')


def list_user_jobs(user_id, limit=None, offset=None):
    """
    Jobs of a user, newest first.

    Ties on created_at are broken by id so pages stay stable. `limit` and
    `offset` are independently optional.
    """
    jobs = GenerationJob.objects.filter(user_id=user_id).order_by('-created_at', '-id')

    start = offset or 0
    if limit is not None:
        return list(jobs[start:start + limit])
    return list(jobs[start:])


def list_job_headshots(job_id):
    """All headshots of a job; empty for an unknown job."""
    return list(
        GeneratedHeadshot.objects.filter(generation_job_id=job_id).order_by('id')
    )


def list_user_selected_headshots(user_id):
    return list(
        GeneratedHeadshot.objects.filter(
            generation_job__user_id=user_id,
            is_selected=True,
        ).order_by('-generation_job__created_at', 'id')
    )
