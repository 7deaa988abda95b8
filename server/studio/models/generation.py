"""Generation job and generated headshot models.

A `GenerationJob` is one user request to render a source photo in several
styles. It owns exactly one `GeneratedHeadshot` per requested style; those rows
are created together with the job and then filled in by the generation tasks
(pending -> completed/failed).
"""

from django.conf import settings
from django.db import models


class GenerationJob(models.Model):
    """Headshot generation job tracking"""

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('processing', 'Processing'),
        ('completed', 'Completed'),
        ('failed', 'Failed'),
    ]

    TERMINAL_STATUSES = ('completed', 'failed')

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='generation_jobs'
    )
    image_upload = models.ForeignKey(
        'ImageUpload',
        on_delete=models.CASCADE,
        related_name='generation_jobs'
    )
    style_option_ids = models.JSONField(
        default=list,
        help_text="Requested style option ids, in request order"
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending'
    )
    error_message = models.TextField(
        null=True,
        blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Set when the job reaches completed or failed"
    )

    class Meta:
        db_table = 'generation_jobs'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='generation__user_id_8a2d41_idx'),
            models.Index(fields=['status', 'created_at'], name='generation__status_5e9b07_idx'),
        ]

    def __str__(self):
        """Return a human-readable representation of the job."""
        return f"Job {self.id} - {self.status} ({self.user.email})"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES


class GeneratedHeadshot(models.Model):
    """One generated artifact for a (job, style) pair"""

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('completed', 'Completed'),
        ('failed', 'Failed'),
    ]

    generation_job = models.ForeignKey(
        GenerationJob,
        on_delete=models.CASCADE,
        related_name='headshots'
    )
    style_option = models.ForeignKey(
        'StyleOption',
        on_delete=models.PROTECT,
        related_name='generated_headshots'
    )
    file_path = models.CharField(
        max_length=1024,
        blank=True,
        default='',
        help_text="Cloudinary URL of the generated artifact"
    )
    file_size = models.PositiveIntegerField(
        default=0,
        help_text="Artifact size in bytes"
    )
    generation_status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending'
    )
    quality_score = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Opaque 1-100 score reported by the generator"
    )
    error_message = models.TextField(
        null=True,
        blank=True,
        help_text="Why generation failed for this style"
    )
    is_selected = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'generated_headshots'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['generation_job', 'style_option'],
                name='unique_headshot_per_job_style',
            ),
            models.UniqueConstraint(
                fields=['generation_job'],
                condition=models.Q(is_selected=True),
                name='single_selected_headshot_per_job',
            ),
        ]
        indexes = [
            models.Index(fields=['generation_job', 'generation_status'], name='generated_h_generat_4b7c2a_idx'),
        ]

    def __str__(self):
        return f"Headshot {self.id} - job {self.generation_job_id} / style {self.style_option_id} ({self.generation_status})"

    @property
    def is_terminal(self):
        return self.generation_status != 'pending'
