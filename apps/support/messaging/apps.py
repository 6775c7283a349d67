from django.apps import AppConfig


class MessagingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.support.messaging"
    label = "messaging"

    def ready(self):
        # binds shared_task to the project Celery app (broker / eager settings)
        import apps.api.celery  # noqa: F401
