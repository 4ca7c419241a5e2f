from django.db import models

from .candidate import Candidate
from .vacancy import Vacancy


class CandidateVacancyStatus(models.Model):
    """
    Stage of the recruiting pipeline.

    `sort` ranks are dense (0..n-1) and at most one status is the initial
    one. Both are maintained by ats.recruitment.utils.pipeline only, never
    write them directly.
    """
    name = models.CharField(max_length=255)
    sort = models.PositiveIntegerField(default=0, db_index=True)
    is_initial = models.BooleanField(default=False)

    class Meta:
        ordering = ('sort', 'id')
        verbose_name_plural = 'candidate vacancy statuses'

    def __str__(self):
        return f"{self.sort}. {self.name}"


class CandidateVacancy(models.Model):
    """A candidate's entry in a vacancy's pipeline"""
    candidate = models.ForeignKey(
        Candidate, on_delete=models.CASCADE, related_name='candidate_vacancies'
    )
    vacancy = models.ForeignKey(
        Vacancy, on_delete=models.CASCADE, related_name='candidates'
    )
    candidate_vacancy_status = models.ForeignKey(
        CandidateVacancyStatus,
        on_delete=models.PROTECT,
        related_name='candidate_vacancies'
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-id')
        unique_together = ('candidate', 'vacancy')
        verbose_name_plural = 'candidate vacancies'

    def __str__(self):
        return f"{self.candidate} in {self.vacancy}"
