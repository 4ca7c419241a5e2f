from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from ats.common.models import Area, Industry, Seniority, VacancyStatus
from .company import Company


class VacancyFilters(models.Model):
    """Candidate profile a vacancy is looking for"""
    min_stars = models.DecimalField(
        max_digits=3, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(0)]
    )
    gender = models.CharField(max_length=50, blank=True)
    min_age = models.PositiveSmallIntegerField(null=True, blank=True)
    max_age = models.PositiveSmallIntegerField(null=True, blank=True)
    countries = models.JSONField(default=list, blank=True)
    provinces = models.JSONField(default=list, blank=True)
    languages = models.JSONField(default=list, blank=True)

    areas = models.ManyToManyField(Area, blank=True, related_name='vacancy_filters')
    industries = models.ManyToManyField(Industry, blank=True, related_name='vacancy_filters')
    seniorities = models.ManyToManyField(Seniority, blank=True, related_name='vacancy_filters')

    class Meta:
        verbose_name_plural = 'vacancy filters'

    def __str__(self):
        return f"Filters #{self.id}"


class Vacancy(models.Model):
    title = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    status = models.ForeignKey(
        VacancyStatus, on_delete=models.PROTECT, related_name='vacancies'
    )
    filters = models.OneToOneField(
        VacancyFilters, on_delete=models.CASCADE, related_name='vacancy'
    )
    company = models.ForeignKey(
        Company, on_delete=models.PROTECT, related_name='vacancies'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='created_vacancies'
    )
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='assigned_vacancies'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-id')
        verbose_name_plural = 'vacancies'

    def __str__(self):
        return self.title
