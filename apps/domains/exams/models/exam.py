from django.db import models

from apps.core.models.base import BaseModel


class Exam(BaseModel):
    """
    Standardized test definition (meta only).
    Parts / writing tasks hang off it; authoring happens elsewhere.
    """

    tenant = models.ForeignKey(
        "core.Tenant",
        on_delete=models.CASCADE,
        related_name="exams",
    )

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title
