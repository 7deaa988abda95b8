from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from studio import services
from studio.serializers import GeneratedHeadshotSerializer, SelectHeadshotSerializer
from studio.utils import format_error


@api_view(["POST"])
@permission_classes([AllowAny])
def select_headshot(request, headshot_id):
    """
    Select a headshot as the accepted result of its job.

    Any headshot previously selected in the same job is unselected.
    """
    serializer = SelectHeadshotSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            format_error(
                code="validation_error",
                message="Invalid selection",
                details=serializer.errors,
            ),
            status=status.HTTP_400_BAD_REQUEST,
        )

    headshot = services.select_headshot(serializer.validated_data["user_id"], headshot_id)
    return Response(GeneratedHeadshotSerializer(headshot).data)
