"""Per-style generation task body.

Produces one headshot: calls the generation API, stores the artifact in
Cloudinary and records the outcome on the `GeneratedHeadshot` row. The parent
job row is never written here.
"""

import logging
from io import BytesIO

import requests
from django.conf import settings
from PIL import Image, UnidentifiedImageError

from studio.const import build_prompt
from studio.models import GeneratedHeadshot
from studio.utils.generator_client import GeneratorClient
from studio.utils.storage import CloudinaryStorage

logger = logging.getLogger(__name__)


def _download_artifact(url):
    response = requests.get(url, timeout=30)
    response.raise_for_status()
    return response.content


def _verify_image(content):
    try:
        Image.open(BytesIO(content)).verify()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"Generator returned an invalid image: {exc}")


def _normalize_score(score):
    if score is None:
        return None
    try:
        score = int(round(float(score)))
    except (TypeError, ValueError):
        return None
    return min(max(score, 1), 100)


def mark_headshot_failed(headshot_id, reason):
    """Move a pending headshot to failed. Returns False if it was already terminal."""
    updated = GeneratedHeadshot.objects.filter(
        id=headshot_id,
        generation_status='pending',
    ).update(generation_status='failed', error_message=reason)
    return bool(updated)


def mark_headshot_completed(headshot_id, file_path, file_size, quality_score=None):
    """Move a pending headshot to completed. Returns False if it was already terminal."""
    updated = GeneratedHeadshot.objects.filter(
        id=headshot_id,
        generation_status='pending',
    ).update(
        generation_status='completed',
        file_path=file_path,
        file_size=file_size,
        quality_score=_normalize_score(quality_score),
        error_message=None,
    )
    return bool(updated)


def run_generation_task(headshot_id, client=None, storage=None):
    """
    Generate the artifact for one headshot and record the outcome.

    Steps:
    1. Build the prompt for the headshot's style
    2. Run the remote generation and wait for it
    3. Download and verify the output image
    4. Store it through `storage` (Cloudinary unless one is passed)
    5. Mark the headshot completed (or failed on any error)

    Returns the headshot's terminal status, or None if it does not exist.
    """
    try:
        headshot = GeneratedHeadshot.objects.select_related(
            'generation_job__image_upload',
            'style_option',
        ).get(id=headshot_id)
    except GeneratedHeadshot.DoesNotExist:
        logger.error(f"GeneratedHeadshot {headshot_id} not found")
        return None

    if headshot.is_terminal:
        logger.info(f"Headshot {headshot_id} already {headshot.generation_status}, skipping")
        return headshot.generation_status

    job_id = headshot.generation_job_id
    style = headshot.style_option
    client = client or GeneratorClient()
    storage = storage or CloudinaryStorage()
    max_wait = settings.GENERATION_MAX_WAIT_SECONDS

    try:
        logger.info(f"Generating headshot {headshot_id} (job {job_id}, style {style.id})")
        result = client.generate(
            image_url=headshot.generation_job.image_upload.file_path,
            prompt=build_prompt(style),
            style_config=style.background_config,
            max_wait_seconds=max_wait,
        )

        content = _download_artifact(result.output_url)
        _verify_image(content)

        logger.info(f"Uploading headshot {headshot_id} for job {job_id}")
        stored = storage.save_headshot(job_id, content)

    except TimeoutError:
        reason = f"Generation timed out after {max_wait} seconds"
        logger.error(f"Headshot {headshot_id}: {reason}")
        mark_headshot_failed(headshot_id, reason)
        return 'failed'

    except Exception as exc:
        logger.exception(f"Error generating headshot {headshot_id}: {exc}")
        mark_headshot_failed(headshot_id, str(exc) or exc.__class__.__name__)
        return 'failed'

    recorded = mark_headshot_completed(
        headshot_id,
        file_path=stored["url"],
        file_size=stored["bytes"],
        quality_score=result.quality_score,
    )
    if not recorded:
        # Failed elsewhere (scheduling failure, reconcile) while generating
        current = GeneratedHeadshot.objects.get(id=headshot_id).generation_status
        logger.warning(f"Headshot {headshot_id} became {current} during generation, discarding artifact")
        if stored.get("public_id"):
            storage.delete_headshot(stored["public_id"])
        return current

    logger.info(f"Headshot {headshot_id} completed")
    return 'completed'
