from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """
    API root endpoint to make the browsable API navigable.
    """
    return Response(
        {
            "health": reverse("health_check", request=request, format=format),
            "schema": reverse("schema", request=request, format=format),
            "users_create": reverse("create_user", request=request, format=format),
            "uploads_create": reverse("upload_image", request=request, format=format),
            "styles": reverse("style_options", request=request, format=format),
            "jobs_create": reverse("create_generation_job", request=request, format=format),
            "user_jobs_template": "/api/users/{user_id}/jobs/?limit=&offset=",
            "user_selected_headshots_template": "/api/users/{user_id}/selected-headshots/",
            "job_status_template": "/api/jobs/{job_id}/status/",
            "job_headshots_template": "/api/jobs/{job_id}/headshots/",
            "headshot_select_template": "/api/headshots/{headshot_id}/select/",
        }
    )
