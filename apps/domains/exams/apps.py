# apps/domains/exams/apps.py
from django.apps import AppConfig


class ExamsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.exams"
    label = "exams"
    verbose_name = "Exam content (read-only for sessions)"
