import math
from collections import OrderedDict

from django.conf import settings
from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from ats.core.utils.common import to_positive_int


def page_window(page, limit):
    """(offset, limit) pair of the given 1-based page"""
    return (page - 1) * limit, limit


def page_meta(total_items, page, limit):
    return OrderedDict([
        ('totalItems', total_items),
        ('totalPages', math.ceil(total_items / limit)),
        ('currentPage', page),
        ('pageSize', limit),
    ])


class PageLimitPagination(BasePagination):
    """
    Page/limit pagination with an `{items, meta}` envelope.

    ?page=2&limit=20 returns rows 21 to 40. Missing or invalid values fall back
    to page 1 and `DEFAULT_PAGE_LIMIT` rows. `limit` has no upper bound.

    The count runs as its own query, so `totalItems` may drift from the
    windowed rows when writes land in between.
    """
    page_query_param = 'page'
    limit_query_param = 'limit'
    default_page = 1

    @property
    def default_limit(self):
        return getattr(settings, 'DEFAULT_PAGE_LIMIT', 100)

    def get_page(self, request):
        return to_positive_int(
            request.query_params.get(self.page_query_param),
            self.default_page
        )

    def get_limit(self, request):
        return to_positive_int(
            request.query_params.get(self.limit_query_param),
            self.default_limit
        )

    @staticmethod
    def get_count(queryset):
        try:
            return queryset.count()
        except (AttributeError, TypeError):
            return len(queryset)

    def paginate_queryset(self, queryset, request, view=None):
        self.page = self.get_page(request)
        self.limit = self.get_limit(request)
        self.offset, _ = page_window(self.page, self.limit)
        self.count = self.get_count(queryset)
        if self.offset >= self.count:
            return []
        return list(queryset[self.offset:self.offset + self.limit])

    def get_paginated_response(self, data):
        return Response(OrderedDict([
            ('items', data),
            ('meta', page_meta(self.count, self.page, self.limit)),
        ]))

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'items': schema,
                'meta': {
                    'type': 'object',
                    'properties': {
                        'totalItems': {'type': 'integer'},
                        'totalPages': {'type': 'integer'},
                        'currentPage': {'type': 'integer'},
                        'pageSize': {'type': 'integer'},
                    },
                },
            },
        }
