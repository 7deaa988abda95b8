from django.urls import path
from drf_spectacular.views import SpectacularAPIView

from studio import views

urlpatterns = [
    path("", views.api_root, name="api_root"),
    path("health/", views.health_check, name="health_check"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("users/", views.create_user, name="create_user"),
    path("users/<int:user_id>/jobs/", views.user_jobs, name="user_jobs"),
    path(
        "users/<int:user_id>/selected-headshots/",
        views.user_selected_headshots,
        name="user_selected_headshots",
    ),
    path("uploads/", views.upload_image, name="upload_image"),
    path("styles/", views.list_style_options, name="style_options"),
    path("jobs/", views.create_generation_job, name="create_generation_job"),
    path("jobs/<int:job_id>/status/", views.update_job_status, name="update_job_status"),
    path("jobs/<int:job_id>/headshots/", views.job_headshots, name="job_headshots"),
    path(
        "headshots/<int:headshot_id>/select/",
        views.select_headshot,
        name="select_headshot",
    ),
]
