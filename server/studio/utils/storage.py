from io import BytesIO
from typing import Dict

import cloudinary.uploader


class CloudinaryStorage:
    """Blob store for generated headshot artifacts"""

    def __init__(self, folder: str = 'studio/headshots'):
        self.folder = folder.rstrip('/')

    def save_headshot(self, job_id: int, content: bytes) -> Dict:
        """
        Upload one artifact under the job's folder

        Returns:
            dict with url, public_id and size in bytes
        """
        upload = cloudinary.uploader.upload(
            BytesIO(content),
            folder=f'{self.folder}/{job_id}',
            format='png',
            quality='auto:best'
        )
        return {
            'url': upload['secure_url'],
            'public_id': upload.get('public_id'),
            'bytes': upload.get('bytes') or len(content),
        }

    def delete_headshot(self, public_id: str) -> None:
        """Remove an artifact that ended up attached to no headshot"""
        cloudinary.uploader.destroy(public_id)
