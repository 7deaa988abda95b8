import requests
import time
from dataclasses import dataclass
from typing import Dict, Optional
from django.conf import settings

from .exceptions import GenerationError


@dataclass(frozen=True)
class GenerationResult:
    output_url: str
    quality_score: Optional[int] = None


class GeneratorClient:
    """Client for the remote headshot generation API"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key or settings.GENERATOR_API_KEY
        self.base_url = base_url or settings.GENERATOR_API_URL
        self.model = settings.GENERATOR_MODEL
        self.headers = {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.api_key}'
        }

    def create_task(self, image_url: str, prompt: str, style_config: Optional[Dict] = None) -> Dict:
        """
        Create a new generation task

        Args:
            image_url: URL of the source photo
            prompt: Generation prompt for the requested style
            style_config: Opaque style configuration forwarded as-is

        Returns:
            dict with taskId
        """
        url = f"{self.base_url}/jobs/createTask"
        payload = {
            'model': self.model,
            'input': {
                'prompt': prompt,
                'aspect_ratio': '1:1',
                'output_format': 'png',
                'image_input': [image_url],
                'style_config': style_config or {},
            }
        }

        response = requests.post(url, headers=self.headers, json=payload, timeout=30)
        response.raise_for_status()

        result = response.json()
        if result['code'] != 200:
            raise GenerationError(f"Generator API error: {result}")

        return result['data']

    def check_status(self, task_id: str) -> Dict:
        """
        Check the status of a generation task

        Args:
            task_id: The task ID to check

        Returns:
            dict with state, output and optional quality_score
        """
        url = f"{self.base_url}/jobs/recordInfo"
        params = {'taskId': task_id}

        response = requests.get(url, headers=self.headers, params=params, timeout=30)
        response.raise_for_status()

        result = response.json()
        if result['code'] != 200:
            raise GenerationError(f"Generator API error: {result}")

        return result['data']

    def wait_for_completion(self, task_id: str, max_wait_seconds: int = 600) -> Dict:
        """
        Poll task status until completion or timeout

        Raises:
            TimeoutError: If task doesn't complete in time
        """
        start_time = time.time()
        poll_interval = 5  # seconds

        while time.time() - start_time < max_wait_seconds:
            status = self.check_status(task_id)

            if status['state'] in ['success', 'failed']:
                return status

            time.sleep(poll_interval)

        raise TimeoutError(f"Task {task_id} did not complete within {max_wait_seconds} seconds")

    def generate(
        self,
        image_url: str,
        prompt: str,
        style_config: Optional[Dict] = None,
        max_wait_seconds: int = 600,
    ) -> GenerationResult:
        """
        Run one generation end to end and return the output location.

        Raises:
            GenerationError: If the remote task fails or returns no output
            TimeoutError: If the remote task does not finish in time
        """
        task_data = self.create_task(image_url=image_url, prompt=prompt, style_config=style_config)
        result = self.wait_for_completion(task_data['taskId'], max_wait_seconds=max_wait_seconds)

        if result['state'] != 'success':
            raise GenerationError(result.get('failMsg') or result.get('error') or "Generation failed")

        output = result.get('output') or []
        if not output:
            raise GenerationError("Generation succeeded but returned no output")

        return GenerationResult(
            output_url=output[0],
            quality_score=result.get('quality_score'),
        )
