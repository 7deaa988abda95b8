from unittest.mock import Mock, patch

from django.test import SimpleTestCase, override_settings

from studio.utils import GenerationError, GeneratorClient


@override_settings(
    GENERATOR_API_KEY="test-key",
    GENERATOR_API_URL="https://gen.example.com/api/v1",
    GENERATOR_MODEL="test/model",
)
class GeneratorClientTest(SimpleTestCase):
    @patch("studio.utils.generator_client.requests.post")
    def test_create_task_success(self, mock_post):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.return_value = {"code": 200, "data": {"taskId": "task_123"}}
        mock_post.return_value = response

        client = GeneratorClient()
        result = client.create_task(
            image_url="https://example.com/me.jpg",
            prompt="headshot",
            style_config={"color": "navy"},
        )

        self.assertEqual(result["taskId"], "task_123")
        self.assertEqual(mock_post.call_args[0][0], "https://gen.example.com/api/v1/jobs/createTask")
        self.assertEqual(mock_post.call_args[1]["headers"]["Authorization"], "Bearer test-key")
        payload = mock_post.call_args[1]["json"]
        self.assertEqual(payload["model"], "test/model")
        self.assertEqual(payload["input"]["image_input"], ["https://example.com/me.jpg"])
        self.assertEqual(payload["input"]["style_config"], {"color": "navy"})

    @patch("studio.utils.generator_client.requests.post")
    def test_create_task_raises_on_api_error(self, mock_post):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.return_value = {"code": 400, "message": "bad request"}
        mock_post.return_value = response

        with self.assertRaises(GenerationError):
            GeneratorClient().create_task(image_url="https://example.com/me.jpg", prompt="headshot")

    @patch("studio.utils.generator_client.requests.get")
    def test_check_status_success(self, mock_get):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.return_value = {"code": 200, "data": {"state": "success", "output": ["url"]}}
        mock_get.return_value = response

        client = GeneratorClient(base_url="https://other.example.com")
        result = client.check_status("task_123")

        self.assertEqual(result["state"], "success")
        self.assertEqual(mock_get.call_args[0][0], "https://other.example.com/jobs/recordInfo")
        self.assertEqual(mock_get.call_args[1]["params"], {"taskId": "task_123"})

    @patch("studio.utils.generator_client.time.sleep")
    def test_wait_for_completion_returns_on_failure_state(self, _mock_sleep):
        client = GeneratorClient()
        with patch.object(
            client,
            "check_status",
            side_effect=[{"state": "processing"}, {"state": "failed", "failMsg": "nsfw"}],
        ):
            result = client.wait_for_completion("task_123", max_wait_seconds=10)

        self.assertEqual(result["state"], "failed")

    @patch("studio.utils.generator_client.time.sleep")
    def test_wait_for_completion_times_out(self, _mock_sleep):
        client = GeneratorClient()
        with patch.object(client, "check_status", return_value={"state": "processing"}):
            with self.assertRaises(TimeoutError):
                client.wait_for_completion("task_123", max_wait_seconds=0)

    def test_generate_returns_first_output(self):
        client = GeneratorClient()
        with patch.object(client, "create_task", return_value={"taskId": "task_123"}), patch.object(
            client,
            "wait_for_completion",
            return_value={"state": "success", "output": ["https://out/1.png", "https://out/2.png"], "quality_score": 72},
        ):
            result = client.generate("https://example.com/me.jpg", "headshot")

        self.assertEqual(result.output_url, "https://out/1.png")
        self.assertEqual(result.quality_score, 72)

    def test_generate_raises_with_remote_failure_message(self):
        client = GeneratorClient()
        with patch.object(client, "create_task", return_value={"taskId": "task_123"}), patch.object(
            client, "wait_for_completion", return_value={"state": "failed", "failMsg": "face not detected"}
        ):
            with self.assertRaisesMessage(GenerationError, "face not detected"):
                client.generate("https://example.com/me.jpg", "headshot")

    def test_generate_raises_without_output(self):
        client = GeneratorClient()
        with patch.object(client, "create_task", return_value={"taskId": "task_123"}), patch.object(
            client, "wait_for_completion", return_value={"state": "success", "output": []}
        ):
            with self.assertRaises(GenerationError):
                client.generate("https://example.com/me.jpg", "headshot")
