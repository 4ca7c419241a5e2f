from django.db.models import CharField, Exists, OuterRef, Q
from django.db.models.functions import Cast
from django_filters import rest_framework as filters

from ats.core.utils.common import years_ago
from ats.core.utils.filters import (
    DefaultFilterSet, ListFilter, IntegerListFilter, JSONOverlapFilter
)
from ats.recruitment.constants import COMPANY_STATUS_CHOICES
from ats.recruitment.models import Blacklist


class CandidateFilterSet(DefaultFilterSet):
    """
    Deleted and blacklisted candidates are hidden unless asked for with
    `deleted=true` / `blacklisted=true`.
    """
    defaults = {
        'deleted': 'false',
        'blacklisted': 'false',
    }

    id = filters.NumberFilter()
    name = filters.CharFilter(lookup_expr='icontains')
    gender = filters.CharFilter(lookup_expr='icontains')
    short_description = filters.CharFilter(lookup_expr='icontains')
    email = filters.CharFilter(lookup_expr='icontains')
    linkedin = filters.CharFilter(lookup_expr='icontains')
    address = filters.CharFilter(lookup_expr='icontains')
    phone = filters.CharFilter(lookup_expr='icontains')
    document_number = filters.CharFilter(lookup_expr='icontains')

    minimum_age = filters.NumberFilter(min_value=0, method='filter_minimum_age')
    maximum_age = filters.NumberFilter(min_value=0, method='filter_maximum_age')

    countries = ListFilter(field_name='country')
    provinces = JSONOverlapFilter()
    languages = JSONOverlapFilter()

    minimum_stars = filters.NumberFilter(field_name='stars', lookup_expr='gte')
    maximum_stars = filters.NumberFilter(field_name='stars', lookup_expr='lte')

    blacklisted = filters.BooleanFilter(method='filter_blacklisted')
    source_id = filters.NumberFilter(field_name='source')
    area_ids = IntegerListFilter(field_name='areas', distinct=True)
    industry_ids = IntegerListFilter(field_name='industries', distinct=True)
    seniority_ids = IntegerListFilter(field_name='seniorities', distinct=True)
    deleted = filters.BooleanFilter()
    is_in_company = filters.BooleanFilter()

    @staticmethod
    def filter_minimum_age(queryset, name, value):
        # born at least `value` years ago
        return queryset.filter(date_of_birth__lte=years_ago(int(value)))

    @staticmethod
    def filter_maximum_age(queryset, name, value):
        # not yet `value + 1` years old
        return queryset.filter(date_of_birth__gt=years_ago(int(value) + 1))

    @staticmethod
    def filter_blacklisted(queryset, name, value):
        if value is False:
            return queryset.exclude(
                Exists(Blacklist.objects.filter(candidate=OuterRef('pk')))
            )
        return queryset


class CommentFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    candidate_id = filters.NumberFilter(field_name='candidate')
    comment = filters.CharFilter(lookup_expr='contains')
    user_id = filters.NumberFilter(field_name='user')


class BlacklistFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    candidate_id = filters.NumberFilter(field_name='candidate')
    reason = filters.CharFilter(lookup_expr='contains')
    user_id = filters.NumberFilter(field_name='user')


class CompanyFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    name = filters.CharFilter(lookup_expr='icontains')
    description = filters.CharFilter(lookup_expr='iexact')
    status = filters.ChoiceFilter(choices=COMPANY_STATUS_CHOICES)


class VacancyFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    title = filters.CharFilter(lookup_expr='icontains')
    description = filters.CharFilter(lookup_expr='icontains')
    status = filters.NumberFilter()
    company = filters.NumberFilter()
    created_by_id = filters.NumberFilter(field_name='created_by')
    assigned_to_id = filters.NumberFilter(field_name='assigned_to')

    filter_gender = filters.CharFilter(field_name='filters__gender', lookup_expr='iexact')
    filter_min_age = filters.NumberFilter(field_name='filters__min_age')
    filter_max_age = filters.NumberFilter(field_name='filters__max_age')
    filter_min_stars = filters.NumberFilter(field_name='filters__min_stars')
    filter_area_ids = IntegerListFilter(field_name='filters__areas', distinct=True)
    filter_industry_ids = IntegerListFilter(field_name='filters__industries', distinct=True)
    filter_seniority_ids = IntegerListFilter(field_name='filters__seniorities', distinct=True)
    filter_countries = JSONOverlapFilter(field_name='filters__countries')
    filter_provinces = JSONOverlapFilter(field_name='filters__provinces')
    filter_languages = JSONOverlapFilter(field_name='filters__languages')

    search = filters.CharFilter(method='filter_search')

    @staticmethod
    def filter_search(queryset, name, value):
        return queryset.annotate(
            id_text=Cast('id', output_field=CharField())
        ).filter(
            Q(title__icontains=value) | Q(id_text__icontains=value)
        )


class CandidateVacancyFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    candidate_id = filters.NumberFilter(field_name='candidate')
    candidate_ids = IntegerListFilter(field_name='candidate')
    vacancy_id = filters.NumberFilter(field_name='vacancy')
    candidate_vacancy_status_id = filters.NumberFilter(
        field_name='candidate_vacancy_status'
    )
    notes = filters.CharFilter(lookup_expr='iexact')


class CandidateVacancyStatusFilterSet(DefaultFilterSet):
    id = filters.NumberFilter()
    name = filters.CharFilter(lookup_expr='icontains')
    is_initial = filters.BooleanFilter()
