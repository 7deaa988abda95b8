"""DRF serializers for generation jobs and generated headshots.

This module includes:
- read serializers for jobs and headshots
- request serializers for job creation, status override, selection and
  job listing pagination
"""

from rest_framework import serializers
from studio.models import GeneratedHeadshot, GenerationJob


class GenerationJobSerializer(serializers.ModelSerializer):
    """Serializer for GenerationJob model"""

    user_id = serializers.IntegerField(read_only=True)
    image_upload_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = GenerationJob
        fields = [
            'id',
            'user_id',
            'image_upload_id',
            'style_option_ids',
            'status',
            'error_message',
            'created_at',
            'completed_at',
        ]
        read_only_fields = fields


class GeneratedHeadshotSerializer(serializers.ModelSerializer):
    """Serializer for GeneratedHeadshot model"""

    generation_job_id = serializers.IntegerField(read_only=True)
    style_option_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = GeneratedHeadshot
        fields = [
            'id',
            'generation_job_id',
            'style_option_id',
            'file_path',
            'file_size',
            'generation_status',
            'quality_score',
            'error_message',
            'is_selected',
            'created_at',
        ]
        read_only_fields = fields


class CreateGenerationJobSerializer(serializers.Serializer):
    """Serializer for generation job creation request"""

    user_id = serializers.IntegerField()
    image_upload_id = serializers.IntegerField()
    # Count and uniqueness are checked by the job validation service
    style_option_ids = serializers.ListField(child=serializers.IntegerField())


class UpdateJobStatusSerializer(serializers.Serializer):
    """Serializer for the manual job status override"""

    status = serializers.ChoiceField(choices=GenerationJob.STATUS_CHOICES)
    error_message = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class SelectHeadshotSerializer(serializers.Serializer):
    """Serializer for headshot selection request"""

    user_id = serializers.IntegerField()


class UserJobsQuerySerializer(serializers.Serializer):
    """Serializer for job listing pagination parameters"""

    limit = serializers.IntegerField(required=False, min_value=1)
    offset = serializers.IntegerField(required=False, min_value=0)
