"""Account and upload records the generation pipeline reads from."""

import logging

from django.db import IntegrityError, transaction

from studio.models import ImageUpload, User
from studio.utils.exceptions import DuplicateEmailError, UserNotFoundError

logger = logging.getLogger(__name__)


def create_user(email, name):
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError(email)

    try:
        with transaction.atomic():
            user = User.objects.create(email=email, username=email, name=name)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise DuplicateEmailError(email)

    logger.info(f"Created user {user.id}")
    return user


def register_image_upload(user_id, original_filename, file_path, file_size, mime_type):
    """Record an uploaded photo for a user. The bytes already live in the blob store."""
    if not User.objects.filter(id=user_id).exists():
        raise UserNotFoundError(user_id)

    return ImageUpload.objects.create(
        user_id=user_id,
        original_filename=original_filename,
        file_path=file_path,
        file_size=file_size,
        mime_type=mime_type,
        upload_status='pending',
    )
