import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                (
                    "email",
                    models.EmailField(
                        help_text="Unique contact email, also used as the username.",
                        max_length=254,
                        unique=True,
                    ),
                ),
                ("name", models.CharField(help_text="Display name.", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "db_table": "users",
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="StyleOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField()),
                (
                    "background_type",
                    models.CharField(
                        choices=[
                            ("solid_color", "Solid Color"),
                            ("blurred_office", "Blurred Office"),
                            ("gradient", "Gradient"),
                            ("studio", "Studio"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "background_config",
                    models.JSONField(blank=True, default=dict, help_text="Opaque configuration passed to the generator"),
                ),
                (
                    "is_active",
                    models.BooleanField(default=True, help_text="Only active styles can be requested by new jobs"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "style_options",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ImageUpload",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("original_filename", models.CharField(max_length=255)),
                ("file_path", models.CharField(help_text="Blob store path of the uploaded photo", max_length=1024)),
                ("file_size", models.PositiveIntegerField(help_text="Size of the uploaded photo in bytes")),
                (
                    "mime_type",
                    models.CharField(choices=[("image/jpeg", "JPEG"), ("image/png", "PNG")], max_length=20),
                ),
                (
                    "upload_status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("completed", "Completed"), ("failed", "Failed")],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="image_uploads",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "image_uploads",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["user", "-created_at"], name="image_uploa_user_id_3c1f0e_idx")],
            },
        ),
        migrations.CreateModel(
            name="GenerationJob",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "style_option_ids",
                    models.JSONField(default=list, help_text="Requested style option ids, in request order"),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("processing", "Processing"),
                            ("completed", "Completed"),
                            ("failed", "Failed"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("error_message", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "completed_at",
                    models.DateTimeField(
                        blank=True, help_text="Set when the job reaches completed or failed", null=True
                    ),
                ),
                (
                    "image_upload",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="generation_jobs",
                        to="studio.imageupload",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="generation_jobs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "generation_jobs",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="generation__user_id_8a2d41_idx"),
                    models.Index(fields=["status", "created_at"], name="generation__status_5e9b07_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="GeneratedHeadshot",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "file_path",
                    models.CharField(
                        blank=True, default="", help_text="Cloudinary URL of the generated artifact", max_length=1024
                    ),
                ),
                ("file_size", models.PositiveIntegerField(default=0, help_text="Artifact size in bytes")),
                (
                    "generation_status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("completed", "Completed"), ("failed", "Failed")],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "quality_score",
                    models.PositiveSmallIntegerField(
                        blank=True, help_text="Opaque 1-100 score reported by the generator", null=True
                    ),
                ),
                (
                    "error_message",
                    models.TextField(blank=True, help_text="Why generation failed for this style", null=True),
                ),
                ("is_selected", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "generation_job",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="headshots",
                        to="studio.generationjob",
                    ),
                ),
                (
                    "style_option",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="generated_headshots",
                        to="studio.styleoption",
                    ),
                ),
            ],
            options={
                "db_table": "generated_headshots",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["generation_job", "generation_status"], name="generated_h_generat_4b7c2a_idx"
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("generation_job", "style_option"), name="unique_headshot_per_job_style"
                    ),
                    models.UniqueConstraint(
                        condition=models.Q(("is_selected", True)),
                        fields=("generation_job",),
                        name="single_selected_headshot_per_job",
                    ),
                ],
            },
        ),
    ]
