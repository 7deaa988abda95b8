from django.conf import settings
from django.db import models


class ImageUpload(models.Model):
    """Source photo reference owned by a single user"""

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('completed', 'Completed'),
        ('failed', 'Failed'),
    ]

    MIME_TYPE_CHOICES = [
        ('image/jpeg', 'JPEG'),
        ('image/png', 'PNG'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='image_uploads'
    )
    original_filename = models.CharField(max_length=255)
    file_path = models.CharField(
        max_length=1024,
        help_text="Blob store path of the uploaded photo"
    )
    file_size = models.PositiveIntegerField(
        help_text="Size of the uploaded photo in bytes"
    )
    mime_type = models.CharField(
        max_length=20,
        choices=MIME_TYPE_CHOICES
    )
    upload_status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'image_uploads'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='image_uploa_user_id_3c1f0e_idx'),
        ]

    def __str__(self):
        return f"{self.original_filename} ({self.user.email})"
