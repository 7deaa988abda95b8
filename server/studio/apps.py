from django.apps import AppConfig
from django.conf import settings
from django.core.checks import Tags, Warning, register


class StudioConfig(AppConfig):
    name = "studio"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        @register(Tags.compatibility)
        def _check_generation_settings(app_configs, **kwargs):
            """
            Warn when the generation API or artifact storage is not configured:
            jobs would be accepted but every headshot would fail.
            """
            issues = []
            if not settings.GENERATOR_API_KEY:
                issues.append(
                    Warning(
                        "GENERATOR_API_KEY is not set; generation tasks will fail.",
                        hint="Set GENERATOR_API_KEY in the environment or .env file",
                        id="studio.W001",
                    )
                )
            if not (settings.CLOUDINARY_URL or settings.CLOUDINARY_CLOUD_NAME):
                issues.append(
                    Warning(
                        "Cloudinary is not configured; generated headshots cannot be stored.",
                        hint="Set CLOUDINARY_URL or CLOUDINARY_CLOUD_NAME/API_KEY/API_SECRET",
                        id="studio.W002",
                    )
                )
            return issues
