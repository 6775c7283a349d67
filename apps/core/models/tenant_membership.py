# PATH: apps/core/models/tenant_membership.py
from __future__ import annotations

from django.conf import settings
from django.db import models


class TenantMembership(models.Model):
    """
    User <-> Tenant relation (single source of truth)

    - one user may belong to several tenants
    - role / active flag are per tenant
    """

    class Role(models.TextChoices):
        OWNER = "owner", "Owner"
        ADMIN = "admin", "Admin"
        TEACHER = "teacher", "Teacher"
        STAFF = "staff", "Staff"
        STUDENT = "student", "Student"

    STAFF_ROLES = (Role.OWNER, Role.ADMIN, Role.TEACHER, Role.STAFF)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="tenant_memberships",
    )
    tenant = models.ForeignKey(
        "core.Tenant",
        on_delete=models.CASCADE,
        related_name="memberships",
    )

    role = models.CharField(max_length=20, choices=Role.choices)
    is_active = models.BooleanField(default=True)

    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "core"
        unique_together = ("user", "tenant")
        indexes = [
            models.Index(fields=["tenant", "user"], name="core_membership_tenant_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user} @ {self.tenant} ({self.role})"

    @classmethod
    def is_staff_of(cls, *, user, tenant) -> bool:
        if user is None or tenant is None:
            return False
        return cls.objects.filter(
            user=user,
            tenant=tenant,
            is_active=True,
            role__in=cls.STAFF_ROLES,
        ).exists()
