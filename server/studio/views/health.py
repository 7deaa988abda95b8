import cloudinary
from celery import current_app
from django.conf import settings
from django.core.cache import cache
from django.db import connection
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from studio.models import GenerationJob


def _check_database():
    connection.ensure_connection()
    return "ok"


def _check_cache():
    cache.set("health_check", "ok", 10)
    return "ok" if cache.get("health_check") == "ok" else "error"


def _check_workers():
    broker_url = (getattr(settings, "CELERY_BROKER_URL", "") or "").strip()
    if not broker_url or broker_url.startswith("memory://"):
        return "not configured"
    inspector = current_app.control.inspect()
    stats = inspector.stats() if inspector else None
    return "ok" if stats else "no workers"


def _check_generator():
    return "ok" if settings.GENERATOR_API_KEY and settings.GENERATOR_API_URL else "not configured"


def _check_storage():
    return "ok" if cloudinary.config().cloud_name else "not configured"


HEALTH_CHECKS = {
    "database": _check_database,
    "cache": _check_cache,
    "celery": _check_workers,
    "generator": _check_generator,
    "storage": _check_storage,
}


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for monitoring.

    Headshots are only produced when the database, the Celery workers, the
    generation API and Cloudinary are all reachable; any other answer than
    "ok" reports the service as degraded.
    """
    checks = {}
    for name, check in HEALTH_CHECKS.items():
        try:
            checks[name] = check()
        except Exception as exc:
            checks[name] = f"error: {exc}"

    status_ok = all(value == "ok" for value in checks.values())
    payload = {"status": "healthy" if status_ok else "degraded", "checks": checks}

    if checks["database"] == "ok":
        payload["jobs_in_flight"] = GenerationJob.objects.filter(
            status__in=["pending", "processing"]
        ).count()

    return Response(payload, status=200 if status_ok else 503)
