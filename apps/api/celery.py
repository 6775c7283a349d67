# apps/api/celery.py
import os

from celery import Celery

# settings module is normally injected from outside (worker.py in deployment)
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.worker")

app = Celery("exam_sessions")

app.config_from_object(
    "django.conf:settings",
    namespace="CELERY",
)

# discover tasks.py in INSTALLED_APPS
app.autodiscover_tasks()
