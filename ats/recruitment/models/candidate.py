from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from ats.common.models import (
    BaseModel, Area, Industry, Seniority,
    CandidateSource, CandidateFile
)
from ats.recruitment.constants import DELETED_SUFFIX


class Candidate(BaseModel):
    """
    A person in the recruiting database.

    Candidates are never removed, deleting one sets `deleted` and suffixes the
    name so the original name can be reused.
    """
    name = models.CharField(max_length=255, db_index=True)
    image = models.CharField(max_length=1000, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=50, blank=True)
    short_description = models.TextField(blank=True)
    email = models.EmailField(max_length=255)
    linkedin = models.CharField(max_length=255, blank=True)
    address = models.CharField(max_length=255, blank=True)
    document_number = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    country = models.CharField(max_length=100, blank=True, db_index=True)
    provinces = models.JSONField(default=list, blank=True)
    languages = models.JSONField(default=list, blank=True)
    source = models.ForeignKey(
        CandidateSource,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='candidates'
    )
    stars = models.DecimalField(
        max_digits=3, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(0)]
    )
    is_in_company = models.BooleanField(default=False)
    deleted = models.BooleanField(default=False, db_index=True)
    blacklisted = models.BooleanField(default=False)

    areas = models.ManyToManyField(Area, blank=True, related_name='candidates')
    industries = models.ManyToManyField(Industry, blank=True, related_name='candidates')
    seniorities = models.ManyToManyField(Seniority, blank=True, related_name='candidates')
    files = models.ManyToManyField(CandidateFile, blank=True, related_name='candidates')

    def __str__(self):
        return self.name

    def sync_blacklisted(self):
        # bypass any prefetched `blacklist` cache
        blacklisted = Blacklist.objects.filter(candidate_id=self.pk).exists()
        if blacklisted != self.blacklisted:
            self.blacklisted = blacklisted
            self.save(update_fields=['blacklisted', 'modified_at'])

    def soft_delete(self):
        self.deleted = True
        if not self.name.endswith(DELETED_SUFFIX):
            self.name = f"{self.name}{DELETED_SUFFIX}"
        self.save(update_fields=['deleted', 'name', 'modified_at'])


class Comment(models.Model):
    candidate = models.ForeignKey(
        Candidate, on_delete=models.CASCADE, related_name='comments'
    )
    comment = models.TextField()
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        on_delete=models.SET_NULL,
        related_name='candidate_comments'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return f"{self.user} on {self.candidate}"


class Blacklist(models.Model):
    candidate = models.ForeignKey(
        Candidate, on_delete=models.CASCADE, related_name='blacklist'
    )
    reason = models.TextField(blank=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        on_delete=models.SET_NULL,
        related_name='blacklisted_candidates'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return f"{self.candidate} blacklisted by {self.user}"
