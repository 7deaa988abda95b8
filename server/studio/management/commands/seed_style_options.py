"""Django management command to seed the default style catalog.

This command is intended for development/initial deployment and is idempotent:
it uses ``get_or_create`` keyed on the style name so running it multiple times
will not duplicate rows.
"""

from django.core.management.base import BaseCommand

from studio.models import StyleOption

DEFAULT_STYLES = [
    {
        "name": "Professional White",
        "description": "Clean white backdrop for corporate profiles",
        "background_type": "solid_color",
        "background_config": {"color": "white"},
    },
    {
        "name": "Modern Office",
        "description": "Softly blurred office environment",
        "background_type": "blurred_office",
        "background_config": {"blur": 5},
    },
    {
        "name": "Blue Gradient",
        "description": "Smooth blue gradient backdrop",
        "background_type": "gradient",
        "background_config": {"start": "navy blue", "end": "light blue"},
    },
    {
        "name": "Classic Studio",
        "description": "Neutral grey studio backdrop",
        "background_type": "studio",
        "background_config": {},
    },
]


class Command(BaseCommand):
    """Create (or ensure existence of) default `StyleOption` rows."""

    help = "Create the default style options"

    def handle(self, *args, **options):
        """Create default style options if they do not already exist."""
        for style_data in DEFAULT_STYLES:
            style, created = StyleOption.objects.get_or_create(
                name=style_data["name"],
                defaults={
                    "description": style_data["description"],
                    "background_type": style_data["background_type"],
                    "background_config": style_data["background_config"],
                    "is_active": True,
                },
            )

            if created:
                self.stdout.write(
                    self.style.SUCCESS(f"Created style option: {style.name} ({style.background_type})")
                )
            else:
                self.stdout.write(
                    self.style.WARNING(f"Style option already exists: {style.name}")
                )

        self.stdout.write(self.style.SUCCESS("Style options initialization complete"))
