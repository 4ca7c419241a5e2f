import factory
from factory.django import DjangoModelFactory

from ats.common.models import (
    Area, Industry, Seniority, CandidateSource, VacancyStatus, CandidateFile
)


class AreaFactory(DjangoModelFactory):
    class Meta:
        model = Area
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Area {n}')


class IndustryFactory(DjangoModelFactory):
    class Meta:
        model = Industry
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Industry {n}')


class SeniorityFactory(DjangoModelFactory):
    class Meta:
        model = Seniority
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Seniority {n}')


class CandidateSourceFactory(DjangoModelFactory):
    class Meta:
        model = CandidateSource
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Source {n}')


class VacancyStatusFactory(DjangoModelFactory):
    class Meta:
        model = VacancyStatus
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Status {n}')


class CandidateFileFactory(DjangoModelFactory):
    class Meta:
        model = CandidateFile

    name = factory.Faker('file_name', extension='pdf')
    url = factory.Faker('url')
