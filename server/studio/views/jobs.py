from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from studio import services
from studio.serializers import (
    CreateGenerationJobSerializer,
    GeneratedHeadshotSerializer,
    GenerationJobSerializer,
    UpdateJobStatusSerializer,
)
from studio.services.orchestrator import UNSET
from studio.utils import format_error


@api_view(["POST"])
@permission_classes([AllowAny])
def create_generation_job(request):
    """
    Create a generation job for an uploaded image and a set of styles.

    Returns immediately with the pending job; headshots are generated by
    background workers.
    """
    serializer = CreateGenerationJobSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid generation request",
                details=serializer.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    data = serializer.validated_data
    job = services.create_generation_job(
        user_id=data["user_id"],
        image_upload_id=data["image_upload_id"],
        style_option_ids=data["style_option_ids"],
    )

    return Response(
        GenerationJobSerializer(job).data,
        status=status.HTTP_201_CREATED,
    )


@api_view(["PATCH"])
@permission_classes([AllowAny])
def update_job_status(request, job_id):
    """
    Manually override a job status (operator escape hatch).
    """
    serializer = UpdateJobStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid status update",
                details=serializer.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    data = serializer.validated_data
    job = services.update_job_status(
        job_id,
        data["status"],
        error_message=data.get("error_message", UNSET),
    )

    return Response(GenerationJobSerializer(job).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def job_headshots(request, job_id):
    """
    List every headshot of a job, whatever its status.
    """
    headshots = services.list_job_headshots(job_id)

    serializer = GeneratedHeadshotSerializer(headshots, many=True)
    return Response(serializer.data)
