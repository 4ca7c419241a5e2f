from django.db import models


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-modified_at')
        abstract = True


class BaseModel(TimeStampedModel):
    class Meta:
        ordering = ('-created_at', '-modified_at')
        abstract = True


class NamedLookupModel(models.Model):
    """Taxonomy entry identified by a unique name"""
    name = models.CharField(max_length=255, unique=True, db_index=True)

    class Meta:
        ordering = ('id',)
        abstract = True

    def __str__(self):
        return f"{self.name}"
