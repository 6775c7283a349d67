# PATH: apps/core/models/base.py
"""
Shared abstract models (TimestampModel, BaseModel).

Defined in core so both API and worker processes can import them.
"""
from django.db import models


class TimestampModel(models.Model):
    """created_at / updated_at bookkeeping"""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """Base for every domain model that carries timestamps."""
    class Meta:
        abstract = True
