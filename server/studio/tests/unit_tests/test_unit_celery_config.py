from datetime import timedelta

from django.conf import settings
from django.test import SimpleTestCase
from celery import Celery

import config
from studio.tasks import reconcile_generation_jobs


class CeleryConfigTest(SimpleTestCase):
    def test_celery_app_is_exposed(self):
        self.assertTrue(hasattr(config, "celery_app"))
        self.assertIsInstance(config.celery_app, Celery)

    def test_reconcile_task_is_scheduled_from_settings(self):
        entry = config.celery_app.conf.beat_schedule["reconcile-generation-jobs"]

        self.assertEqual(entry["task"], reconcile_generation_jobs.name)
        self.assertEqual(entry["schedule"], timedelta(minutes=settings.RECONCILE_INTERVAL_MINUTES))
