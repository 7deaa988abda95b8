from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from studio import services
from studio.serializers import ImageUploadSerializer, StyleOptionSerializer, UploadImageSerializer
from studio.utils import format_error


@api_view(["POST"])
@permission_classes([AllowAny])
def upload_image(request):
    """
    Register an uploaded photo already stored in the blob store.
    """
    serializer = UploadImageSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid upload",
                details=serializer.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    upload = services.register_image_upload(**serializer.validated_data)
    return Response(ImageUploadSerializer(upload).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([AllowAny])
def list_style_options(request):
    """
    List the style options that can be requested.
    """
    serializer = StyleOptionSerializer(services.list_active_style_options(), many=True)
    return Response(serializer.data)
