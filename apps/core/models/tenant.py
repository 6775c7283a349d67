# PATH: apps/core/models/tenant.py
from django.db import models


class Tenant(models.Model):
    """
    Tenant == training center
    Unit of isolation for exams, assignments and staff.
    """

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=50, unique=True)

    contact_email = models.EmailField(blank=True, default="")

    is_active = models.BooleanField(default=True)

    class Meta:
        app_label = "core"
        verbose_name = "Tenant"
        verbose_name_plural = "Tenants"

    def __str__(self):
        return self.name
