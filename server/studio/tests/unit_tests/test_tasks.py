from io import BytesIO
from unittest.mock import Mock, patch

from django.test import TestCase, override_settings
from PIL import Image

from studio.models import GeneratedHeadshot, GenerationJob, ImageUpload, StyleOption, User
from studio.services.generation import run_generation_task
from studio.tasks import dispatch_generation_job, generate_headshot, reconcile_generation_jobs
from studio.utils import CloudinaryStorage, GenerationError, GenerationResult


def make_png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (64, 64), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


class GenerationTaskTestMixin:
    def setUp(self):
        self.user = User.objects.create(email="owner@example.com", name="Owner")
        self.image = ImageUpload.objects.create(
            user=self.user,
            original_filename="me.jpg",
            file_path="https://res.cloudinary.com/demo/me.jpg",
            file_size=1024,
            mime_type="image/jpeg",
        )
        self.style_a = StyleOption.objects.create(
            name="White",
            description="",
            background_type="solid_color",
            background_config={"color": "white"},
        )
        self.style_b = StyleOption.objects.create(name="Office", description="", background_type="blurred_office")
        self.job = GenerationJob.objects.create(
            user=self.user,
            image_upload=self.image,
            style_option_ids=[self.style_a.id, self.style_b.id],
            status="processing",
        )
        self.headshot_a = GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_a)
        self.headshot_b = GeneratedHeadshot.objects.create(generation_job=self.job, style_option=self.style_b)

    def mock_download(self, mock_get, content=None):
        response = Mock()
        response.content = content if content is not None else make_png_bytes()
        response.raise_for_status.return_value = None
        mock_get.return_value = response


@override_settings(GENERATION_MAX_WAIT_SECONDS=30)
class RunGenerationTaskTest(GenerationTaskTestMixin, TestCase):
    @patch("studio.services.generation.requests.get")
    def test_success_records_artifact(self, mock_get):
        self.mock_download(mock_get)
        client = Mock()
        client.generate.return_value = GenerationResult("https://gen.example.com/out.png", quality_score=87.4)
        storage = Mock()
        storage.save_headshot.return_value = {"url": "https://res.cloudinary.com/demo/headshot.png", "bytes": 2048}

        status = run_generation_task(self.headshot_a.id, client=client, storage=storage)

        self.assertEqual(status, "completed")
        self.headshot_a.refresh_from_db()
        self.assertEqual(self.headshot_a.generation_status, "completed")
        self.assertEqual(self.headshot_a.file_path, "https://res.cloudinary.com/demo/headshot.png")
        self.assertEqual(self.headshot_a.file_size, 2048)
        self.assertEqual(self.headshot_a.quality_score, 87)
        kwargs = client.generate.call_args.kwargs
        self.assertEqual(kwargs["image_url"], self.image.file_path)
        self.assertEqual(kwargs["style_config"], {"color": "white"})
        self.assertEqual(kwargs["max_wait_seconds"], 30)
        self.assertIn("solid white backdrop", kwargs["prompt"])
        storage.save_headshot.assert_called_once_with(self.job.id, mock_get.return_value.content)

    def test_generation_error_is_recorded_on_headshot(self):
        client = Mock()
        client.generate.side_effect = GenerationError("content policy violation")

        status = run_generation_task(self.headshot_a.id, client=client, storage=Mock())

        self.assertEqual(status, "failed")
        self.headshot_a.refresh_from_db()
        self.assertEqual(self.headshot_a.generation_status, "failed")
        self.assertEqual(self.headshot_a.error_message, "content policy violation")
        self.job.refresh_from_db()
        self.assertEqual(self.job.status, "processing")

    def test_timeout_is_recorded_on_headshot(self):
        client = Mock()
        client.generate.side_effect = TimeoutError

        status = run_generation_task(self.headshot_a.id, client=client, storage=Mock())

        self.assertEqual(status, "failed")
        self.headshot_a.refresh_from_db()
        self.assertEqual(self.headshot_a.error_message, "Generation timed out after 30 seconds")

    @patch("studio.services.generation.requests.get")
    def test_invalid_image_fails_without_storing(self, mock_get):
        self.mock_download(mock_get, content=b"not-an-image")
        client = Mock()
        client.generate.return_value = GenerationResult("https://gen.example.com/out.png")
        storage = Mock()

        status = run_generation_task(self.headshot_a.id, client=client, storage=storage)

        self.assertEqual(status, "failed")
        storage.save_headshot.assert_not_called()
        self.headshot_a.refresh_from_db()
        self.assertTrue(self.headshot_a.error_message.startswith("Generator returned an invalid image"))

    def test_terminal_headshot_is_not_regenerated(self):
        GeneratedHeadshot.objects.filter(id=self.headshot_a.id).update(generation_status="completed")
        client = Mock()

        status = run_generation_task(self.headshot_a.id, client=client, storage=Mock())

        self.assertEqual(status, "completed")
        client.generate.assert_not_called()

    def test_unknown_headshot(self):
        self.assertIsNone(run_generation_task(4242, client=Mock(), storage=Mock()))

    @patch("studio.services.generation.requests.get")
    def test_headshot_failed_during_generation_discards_artifact(self, mock_get):
        self.mock_download(mock_get)
        client = Mock()
        client.generate.return_value = GenerationResult("https://gen.example.com/out.png", quality_score=90)

        def fail_then_store(job_id, content):
            GeneratedHeadshot.objects.filter(id=self.headshot_a.id).update(
                generation_status="failed",
                error_message="Scheduling failed: broker down",
            )
            return {
                "url": "https://res.cloudinary.com/demo/late.png",
                "public_id": f"studio/headshots/{job_id}/late",
                "bytes": 10,
            }

        storage = Mock()
        storage.save_headshot.side_effect = fail_then_store

        status = run_generation_task(self.headshot_a.id, client=client, storage=storage)

        self.assertEqual(status, "failed")
        storage.delete_headshot.assert_called_once_with(f"studio/headshots/{self.job.id}/late")
        self.headshot_a.refresh_from_db()
        self.assertEqual(self.headshot_a.generation_status, "failed")
        self.assertEqual(self.headshot_a.error_message, "Scheduling failed: broker down")
        self.assertEqual(self.headshot_a.file_path, "")
        self.assertIsNone(self.headshot_a.quality_score)


class CloudinaryStorageTest(GenerationTaskTestMixin, TestCase):
    @patch("studio.utils.storage.cloudinary.uploader.upload")
    def test_upload_goes_to_job_folder(self, mock_upload):
        mock_upload.return_value = {
            "secure_url": "https://res.cloudinary.com/demo/h.png",
            "public_id": f"studio/headshots/{self.job.id}/h",
            "bytes": 99,
        }

        stored = CloudinaryStorage().save_headshot(self.job.id, b"png-bytes")

        self.assertEqual(
            stored,
            {
                "url": "https://res.cloudinary.com/demo/h.png",
                "public_id": f"studio/headshots/{self.job.id}/h",
                "bytes": 99,
            },
        )
        self.assertEqual(mock_upload.call_args.kwargs["folder"], f"studio/headshots/{self.job.id}")

    @patch("studio.utils.storage.cloudinary.uploader.destroy")
    def test_delete_removes_artifact(self, mock_destroy):
        CloudinaryStorage().delete_headshot("studio/headshots/1/h")

        mock_destroy.assert_called_once_with("studio/headshots/1/h")


@override_settings(GENERATION_MAX_WAIT_SECONDS=30)
class GenerateHeadshotTaskTest(GenerationTaskTestMixin, TestCase):
    @patch("studio.services.generation.CloudinaryStorage")
    @patch("studio.services.generation.GeneratorClient")
    @patch("studio.services.generation.requests.get")
    def test_mixed_outcome_completes_job(self, mock_get, mock_client_cls, mock_storage_cls):
        self.mock_download(mock_get)
        mock_client_cls.return_value.generate.side_effect = [
            GenerationResult("https://gen.example.com/a.png", quality_score=90),
            GenerationError("Generation failed"),
        ]
        mock_storage_cls.return_value.save_headshot.return_value = {
            "url": "https://res.cloudinary.com/demo/a.png",
            "bytes": 100,
        }

        first = generate_headshot(self.job.id, self.headshot_a.id)
        self.assertEqual(first, {"headshot_id": self.headshot_a.id, "status": "completed", "job_status": "processing"})

        second = generate_headshot(self.job.id, self.headshot_b.id)
        self.assertEqual(second, {"headshot_id": self.headshot_b.id, "status": "failed", "job_status": "completed"})

        self.job.refresh_from_db()
        self.assertEqual(self.job.status, "completed")
        self.assertIsNotNone(self.job.completed_at)

    @patch("studio.services.generation.GeneratorClient")
    def test_all_failed_fails_job(self, mock_client_cls):
        mock_client_cls.return_value.generate.side_effect = GenerationError("Generation failed")

        generate_headshot(self.job.id, self.headshot_a.id)
        result = generate_headshot(self.job.id, self.headshot_b.id)

        self.assertEqual(result["job_status"], "failed")
        self.job.refresh_from_db()
        self.assertTrue(self.job.error_message.startswith("All 2 styles failed"))

    @patch("studio.tasks.generation.generate_headshot.delay")
    def test_dispatch_task_fans_out(self, mock_delay):
        GenerationJob.objects.filter(id=self.job.id).update(status="pending")

        status = dispatch_generation_job(self.job.id)

        self.assertEqual(status, "processing")
        self.assertEqual(mock_delay.call_count, 2)

    def test_dispatch_unknown_job(self):
        self.assertIsNone(dispatch_generation_job(4242))

    def test_reconcile_task(self):
        self.job.headshots.update(generation_status="failed", error_message="boom")

        self.assertEqual(reconcile_generation_jobs(), 1)
        self.job.refresh_from_db()
        self.assertEqual(self.job.status, "failed")
