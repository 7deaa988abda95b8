from django.db import models


class StyleOption(models.Model):
    """Background/style template a headshot can be generated with"""

    BACKGROUND_TYPES = [
        ('solid_color', 'Solid Color'),
        ('blurred_office', 'Blurred Office'),
        ('gradient', 'Gradient'),
        ('studio', 'Studio'),
    ]

    name = models.CharField(max_length=100)
    description = models.TextField()
    background_type = models.CharField(
        max_length=20,
        choices=BACKGROUND_TYPES
    )
    background_config = models.JSONField(
        default=dict,
        blank=True,
        help_text="Opaque configuration passed to the generator"
    )
    is_active = models.BooleanField(
        default=True,
        help_text="Only active styles can be requested by new jobs"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'style_options'
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.background_type})"
