import factory
from factory.django import DjangoModelFactory

from ats.common.api.tests.factory import (
    CandidateSourceFactory, VacancyStatusFactory
)
from ats.recruitment.models import (
    Candidate, Comment, Blacklist, Company, Vacancy, VacancyFilters,
    CandidateVacancyStatus, CandidateVacancy
)
from ats.users.api.v1.tests.factory import UserFactory


class CandidateFactory(DjangoModelFactory):
    class Meta:
        model = Candidate

    name = factory.Faker('name')
    email = factory.Faker('email')
    gender = 'Female'
    country = 'Argentina'
    provinces = factory.LazyFunction(lambda: ['Cordoba'])
    languages = factory.LazyFunction(lambda: ['Spanish', 'English'])
    source = factory.SubFactory(CandidateSourceFactory)
    stars = 3


class CommentFactory(DjangoModelFactory):
    class Meta:
        model = Comment

    candidate = factory.SubFactory(CandidateFactory)
    comment = factory.Faker('sentence')
    user = factory.SubFactory(UserFactory)


class BlacklistFactory(DjangoModelFactory):
    class Meta:
        model = Blacklist

    candidate = factory.SubFactory(CandidateFactory)
    reason = factory.Faker('sentence')
    user = factory.SubFactory(UserFactory)


class CompanyFactory(DjangoModelFactory):
    class Meta:
        model = Company

    name = factory.Faker('company')
    client_name = factory.Faker('name')
    client_email = factory.Faker('email')


class VacancyFiltersFactory(DjangoModelFactory):
    class Meta:
        model = VacancyFilters


class VacancyFactory(DjangoModelFactory):
    class Meta:
        model = Vacancy

    title = factory.Faker('job')
    status = factory.SubFactory(VacancyStatusFactory, name='Abierta')
    filters = factory.SubFactory(VacancyFiltersFactory)
    company = factory.SubFactory(CompanyFactory)


class CandidateVacancyStatusFactory(DjangoModelFactory):
    """Bypasses rank bookkeeping, give `sort` explicitly"""

    class Meta:
        model = CandidateVacancyStatus

    name = factory.Sequence(lambda n: f'Stage {n}')


class CandidateVacancyFactory(DjangoModelFactory):
    class Meta:
        model = CandidateVacancy

    candidate = factory.SubFactory(CandidateFactory)
    vacancy = factory.SubFactory(VacancyFactory)
    candidate_vacancy_status = factory.SubFactory(CandidateVacancyStatusFactory)
