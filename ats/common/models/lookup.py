from django.db import models

from .abstract import NamedLookupModel


class Area(NamedLookupModel):
    """Professional area of a candidate or vacancy, eg. IT, RRHH"""


class Industry(NamedLookupModel):
    class Meta(NamedLookupModel.Meta):
        verbose_name_plural = 'industries'


class Seniority(NamedLookupModel):
    """Junior, Semisenior, Senior ..."""

    class Meta(NamedLookupModel.Meta):
        verbose_name_plural = 'seniorities'


class CandidateSource(NamedLookupModel):
    """Channel through which a candidate was sourced"""


class VacancyStatus(NamedLookupModel):
    """
    Status of a vacancy. Statuses named in `ACTIVE_VACANCY_STATUSES` count as
    open vacancies on the dashboard.
    """

    class Meta(NamedLookupModel.Meta):
        verbose_name_plural = 'vacancy statuses'


class CandidateFile(models.Model):
    """
    Reference to a document stored elsewhere (CV, portfolio ...).

    Only the name and location are kept, uploads are handled by the file store.
    """
    name = models.CharField(max_length=255)
    url = models.URLField(max_length=1000)

    class Meta:
        ordering = ('id',)

    def __str__(self):
        return f"{self.name}"
