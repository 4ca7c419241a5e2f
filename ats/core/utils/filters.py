"""
Query building blocks shared by every list endpoint.

Filtering
---------

Filter sets extend :class:`DefaultFilterSet`, whose ``defaults`` are merged into
the query params before any predicate is built::

    class CandidateFilterSet(DefaultFilterSet):
        defaults = {'deleted': 'false'}

so ``?`` and ``?deleted=false`` produce the same query.

Ordering
--------

:class:`OrderStringFilter` reads ``?order=<key>:<asc|desc>``. The key is looked
up in the view's ``ordering_fields_map``::

    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'created_at': ('created_at', 'id'),
    }
"""
import json
import logging
import operator
from functools import reduce

from django import forms
from django.db import connection
from django.db.models import F, Q
from django_filters import rest_framework as filters
from django_filters.constants import EMPTY_VALUES
from rest_framework.exceptions import ValidationError
from rest_framework.filters import BaseFilterBackend

logger = logging.getLogger(__name__)

ORDER_SEPARATOR = ':'
BAD_ORDER_STRING = 'Bad order string'
INVALID_SORT_KEY = 'Invalid sortBy parameter'


def parse_order(order_string):
    """
    Split ``key:direction`` into ``(key, descending)``.

    Anything but exactly two parts is a client error. Direction is descending
    only for ``desc`` (any case), ascending otherwise.
    """
    parts = order_string.split(ORDER_SEPARATOR)
    if len(parts) != 2:
        raise ValidationError({'order': BAD_ORDER_STRING})
    key, direction = parts
    return key, direction.strip().lower() == 'desc'


def json_array_overlap(field_name, values):
    """
    Q matching rows whose JSON array `field_name` shares any element with `values`.

    Postgres uses jsonb containment per element, other backends match the
    serialized element inside the stored array text.
    """
    if connection.vendor == 'postgresql':
        clauses = [Q(**{f'{field_name}__contains': [value]}) for value in values]
    else:
        clauses = [Q(**{f'{field_name}__icontains': json.dumps(value)}) for value in values]
    return reduce(operator.or_, clauses)


class ListField(forms.Field):
    """
    Form field for repeated query params.

    ``?ids=1&ids=2``, ``?ids=1,2`` and ``?ids=1`` all clean to a list.
    """
    widget = forms.MultipleHiddenInput

    def __init__(self, *args, child=None, **kwargs):
        self.child = child or forms.CharField()
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in EMPTY_VALUES:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]
        items = []
        for item in value:
            items.extend(part.strip() for part in str(item).split(',') if part.strip())
        return [self.child.clean(item) for item in items]


class ListFilter(filters.Filter):
    """Membership filter: `field_name__in` the given list"""
    field_class = ListField

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('lookup_expr', 'in')
        super().__init__(*args, **kwargs)


class IntegerListFilter(ListFilter):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('child', forms.IntegerField())
        super().__init__(*args, **kwargs)


class JSONOverlapFilter(ListFilter):
    """Any element of the given list is present in the JSON array column"""

    def filter(self, qs, value):
        if value in EMPTY_VALUES:
            return qs
        return qs.filter(json_array_overlap(self.field_name, value))


class DefaultFilterSet(filters.FilterSet):
    """
    FilterSet with default param values.

    Keys in ``defaults`` missing from (or blank in) the request are filled in
    before the form is bound.
    """
    defaults = {}

    def __init__(self, data=None, *args, **kwargs):
        if data is not None and self.defaults:
            data = data.copy()
            for key, value in self.defaults.items():
                if data.get(key) in (None, ''):
                    data[key] = value
        super().__init__(data, *args, **kwargs)


class OrderStringFilter(BaseFilterBackend):
    """
    Order by ``?order=key:direction``, default ``id:asc``.

    Views opt in by declaring ``ordering_fields_map`` (or
    ``get_ordering_fields_map``). A primary key tie-break is always appended so
    windows over the ordering are stable.
    """
    order_param = 'order'
    default_order = 'id:asc'

    @staticmethod
    def get_fields_map(view):
        ordering_map_func = getattr(view, 'get_ordering_fields_map', None)
        if ordering_map_func:
            return ordering_map_func()
        return getattr(view, 'ordering_fields_map', None)

    def get_order_string(self, request, view):
        return (
            request.query_params.get(self.order_param)
            or getattr(view, 'default_order', None)
            or self.default_order
        )

    def get_ordering(self, request, view):
        fields_map = self.get_fields_map(view)
        if fields_map is None:
            return None

        key, descending = parse_order(self.get_order_string(request, view))
        if key not in fields_map:
            logger.debug(f"Rejected sort key {key!r} for {view.__class__.__name__}")
            raise ValidationError({'order': INVALID_SORT_KEY})

        columns = fields_map[key]
        if isinstance(columns, str):
            columns = [columns]
        columns = list(columns)
        if not {'id', 'pk'}.intersection(columns):
            columns.append('pk')

        return [
            F(column).desc(nulls_last=True) if descending
            else F(column).asc(nulls_last=True)
            for column in columns
        ]

    def filter_queryset(self, request, queryset, view):
        ordering = self.get_ordering(request, view)
        if ordering:
            return queryset.order_by(*ordering)
        return queryset
