# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    created_at / updated_at maintained automatically
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    Common base for domain models.
    """
    class Meta:
        abstract = True
