from django_filters import rest_framework as filters

from ats.core.utils.filters import DefaultFilterSet


class NameFilterSet(DefaultFilterSet):
    """?id=1 or ?name=engin for every lookup table"""
    id = filters.NumberFilter()
    name = filters.CharFilter(lookup_expr='icontains')
