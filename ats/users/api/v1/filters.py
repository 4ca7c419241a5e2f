from django_filters import rest_framework as filters

from ats.core.utils.filters import DefaultFilterSet
from ats.permission.constants import ROLE_CHOICES


class UserFilterSet(DefaultFilterSet):
    email = filters.CharFilter(lookup_expr='icontains')
    name = filters.CharFilter(lookup_expr='icontains')
    active = filters.BooleanFilter(field_name='is_active')
    role = filters.ChoiceFilter(choices=ROLE_CHOICES)
    exclude_role = filters.ChoiceFilter(
        choices=ROLE_CHOICES, field_name='role', exclude=True
    )
