"""DRF serializers for users, image uploads and style options."""

from rest_framework import serializers
from studio.models import ImageUpload, StyleOption, User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model"""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CreateUserSerializer(serializers.Serializer):
    """Serializer for user creation request"""

    # Mirrored into User.username, which holds at most 150 characters
    email = serializers.EmailField(max_length=150)
    name = serializers.CharField(min_length=1, max_length=255)


class ImageUploadSerializer(serializers.ModelSerializer):
    """Serializer for ImageUpload model"""

    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = ImageUpload
        fields = [
            'id',
            'user_id',
            'original_filename',
            'file_path',
            'file_size',
            'mime_type',
            'upload_status',
            'created_at',
        ]
        read_only_fields = fields


class UploadImageSerializer(serializers.Serializer):
    """Serializer for image upload registration"""

    user_id = serializers.IntegerField()
    original_filename = serializers.CharField(max_length=255)
    file_path = serializers.CharField(max_length=1024)
    file_size = serializers.IntegerField(min_value=1)
    mime_type = serializers.ChoiceField(choices=ImageUpload.MIME_TYPE_CHOICES)


class StyleOptionSerializer(serializers.ModelSerializer):
    """Serializer for StyleOption model"""

    class Meta:
        model = StyleOption
        fields = [
            'id',
            'name',
            'description',
            'background_type',
            'background_config',
            'is_active',
            'created_at',
        ]
        read_only_fields = fields
