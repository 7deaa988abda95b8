from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from studio import services
from studio.serializers import (
    CreateUserSerializer,
    GeneratedHeadshotSerializer,
    GenerationJobSerializer,
    UserJobsQuerySerializer,
    UserSerializer,
)
from studio.utils import format_error


@api_view(["POST"])
@permission_classes([AllowAny])
def create_user(request):
    """
    Register a user by email and name.
    """
    serializer = CreateUserSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid user",
                details=serializer.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    user = services.create_user(**serializer.validated_data)
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([AllowAny])
def user_jobs(request, user_id):
    """
    Get a user's generation jobs, newest first.
    """
    query = UserJobsQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid pagination",
                details=query.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    jobs = services.list_user_jobs(
        user_id,
        limit=query.validated_data.get("limit"),
        offset=query.validated_data.get("offset"),
    )

    serializer = GenerationJobSerializer(jobs, many=True)
    return Response(serializer.data)


@api_view(["GET"])
@permission_classes([AllowAny])
def user_selected_headshots(request, user_id):
    """
    Get the headshots a user selected, across all of their jobs.
    """
    headshots = services.list_user_selected_headshots(user_id)

    serializer = GeneratedHeadshotSerializer(headshots, many=True)
    return Response(serializer.data)
