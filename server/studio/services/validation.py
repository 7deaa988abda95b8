"""Submission checks run before a generation job is created.

Everything here is a pure read: a failed check raises one of the
`studio.utils.exceptions` errors and nothing is written.
"""

from studio.const import MAX_STYLES_PER_JOB
from studio.models import ImageUpload, StyleOption, User
from studio.utils.exceptions import (
    ImageNotFoundError,
    ImageNotOwnedError,
    InvalidStyleSelectionError,
    StyleNotFoundError,
    UserNotFoundError,
)


def check_style_selection(style_option_ids):
    """Reject empty, oversized or duplicated style lists."""
    if not style_option_ids:
        raise InvalidStyleSelectionError("At least one style option is required")

    if len(style_option_ids) > MAX_STYLES_PER_JOB:
        raise InvalidStyleSelectionError(
            f"At most {MAX_STYLES_PER_JOB} style options can be requested",
            {"max_styles": MAX_STYLES_PER_JOB, "requested": len(style_option_ids)},
        )

    seen = set()
    duplicates = []
    for style_id in style_option_ids:
        if style_id in seen and style_id not in duplicates:
            duplicates.append(style_id)
        seen.add(style_id)
    if duplicates:
        raise InvalidStyleSelectionError(
            "Style options must be unique",
            {"duplicate_ids": duplicates},
        )


def validate_job_request(user_id, image_upload_id, style_option_ids):
    """
    Confirm the user owns the image and every requested style is active.

    Returns:
        (user, image_upload, styles) with `styles` in request order
    """
    check_style_selection(style_option_ids)

    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(user_id)

    try:
        image_upload = ImageUpload.objects.get(id=image_upload_id)
    except ImageUpload.DoesNotExist:
        raise ImageNotFoundError(image_upload_id)

    if image_upload.user_id != user.id:
        raise ImageNotOwnedError(image_upload_id, user_id)

    active = StyleOption.objects.filter(is_active=True).in_bulk(style_option_ids)
    missing_ids = [style_id for style_id in style_option_ids if style_id not in active]
    if missing_ids:
        raise StyleNotFoundError(missing_ids)

    styles = [active[style_id] for style_id in style_option_ids]
    return user, image_upload, styles
