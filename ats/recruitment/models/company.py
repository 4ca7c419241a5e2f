from django.db import models

from ats.common.models import BaseModel
from ats.recruitment.constants import COMPANY_STATUS_CHOICES, ACTIVO


class Company(BaseModel):
    """Client company vacancies are opened for"""
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    status = models.CharField(
        max_length=20, choices=COMPANY_STATUS_CHOICES, default=ACTIVO,
        db_index=True
    )
    client_name = models.CharField(max_length=255, blank=True)
    client_email = models.EmailField(max_length=255, blank=True)
    client_phone = models.CharField(max_length=50, blank=True)

    class Meta:
        ordering = ('id',)
        verbose_name_plural = 'companies'

    def __str__(self):
        return self.name
