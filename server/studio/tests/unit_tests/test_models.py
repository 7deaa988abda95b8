from django.db import IntegrityError, transaction
from django.test import TestCase

from studio.models import GeneratedHeadshot, GenerationJob, ImageUpload, StyleOption, User


class UserModelTest(TestCase):
    def test_create_user_mirrors_email_and_has_no_password(self):
        user = User.objects.create(email="test@example.com", name="Test User")

        self.assertEqual(user.username, "test@example.com")
        self.assertFalse(user.has_usable_password())
        self.assertEqual(str(user), "test@example.com")

    def test_unique_email_is_enforced(self):
        User.objects.create(email="test@example.com", username="one", name="One")

        with self.assertRaises(IntegrityError):
            User.objects.create(email="test@example.com", username="two", name="Two")


class GenerationModelsTest(TestCase):
    def setUp(self):
        self.user = User.objects.create(email="test@example.com", name="Test User")
        self.image = ImageUpload.objects.create(
            user=self.user,
            original_filename="me.jpg",
            file_path="https://res.cloudinary.com/demo/me.jpg",
            file_size=1024,
            mime_type="image/jpeg",
        )
        self.style_a = StyleOption.objects.create(name="A", description="", background_type="solid_color")
        self.style_b = StyleOption.objects.create(name="B", description="", background_type="studio")
        self.job = GenerationJob.objects.create(
            user=self.user,
            image_upload=self.image,
            style_option_ids=[self.style_a.id, self.style_b.id],
        )

    def test_defaults(self):
        headshot = GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a)

        self.assertEqual(self.job.status, "pending")
        self.assertIsNone(self.job.completed_at)
        self.assertFalse(self.job.is_terminal)
        self.assertEqual(self.image.upload_status, "pending")
        self.assertEqual(headshot.generation_status, "pending")
        self.assertFalse(headshot.is_selected)
        self.assertFalse(headshot.is_terminal)
        self.assertIsNone(headshot.quality_score)

    def test_one_headshot_per_job_and_style(self):
        GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a)

    def test_at_most_one_selected_headshot_per_job(self):
        GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a, is_selected=True)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                GeneratedHeadshot.objects.create(
                    generation_job=self.job,
                    style_option=self.style_b,
                    is_selected=True,
                )

        # Unselected siblings are unaffected by the constraint
        GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_b)
        self.assertEqual(self.job.headshots.count(), 2)

    def test_deleting_job_removes_headshots(self):
        GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a)

        self.job.delete()

        self.assertEqual(GeneratedHeadshot.objects.count(), 0)
