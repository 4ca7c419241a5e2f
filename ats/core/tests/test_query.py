from django.test import SimpleTestCase
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from ats.core.pagination import PageLimitPagination, page_meta, page_window
from ats.core.utils.common import to_positive_int
from ats.core.utils.filters import OrderStringFilter, parse_order


class DummyView:
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'created_at': ('created_at', 'id'),
    }


class TestParseOrder(SimpleTestCase):
    def test_direction(self):
        self.assertEqual(parse_order('name:asc'), ('name', False))
        self.assertEqual(parse_order('name:DESC'), ('name', True))
        self.assertEqual(parse_order('name:whatever'), ('name', False))

    def test_bad_order_string(self):
        for order in ('id', 'id:asc:desc', ''):
            with self.subTest(order=order):
                with self.assertRaises(ValidationError) as context:
                    parse_order(order)
                self.assertEqual(
                    context.exception.detail['order'], 'Bad order string'
                )


class TestOrderStringFilter(SimpleTestCase):
    def get_ordering(self, query=''):
        request = Request(APIRequestFactory().get(f'/{query}'))
        return OrderStringFilter().get_ordering(request, DummyView())

    def test_default_order_is_id_ascending(self):
        ordering = self.get_ordering()
        self.assertEqual(len(ordering), 1)
        self.assertEqual(ordering[0].expression.name, 'id')
        self.assertFalse(ordering[0].descending)

    def test_primary_key_tie_break_is_appended(self):
        ordering = self.get_ordering('?order=name:desc')
        self.assertEqual(
            [expression.expression.name for expression in ordering],
            ['name', 'pk']
        )
        self.assertTrue(all(expression.descending for expression in ordering))

    def test_unknown_key(self):
        with self.assertRaises(ValidationError) as context:
            self.get_ordering('?order=password:asc')
        self.assertEqual(
            context.exception.detail['order'], 'Invalid sortBy parameter'
        )

    def test_views_without_map_are_left_alone(self):
        request = Request(APIRequestFactory().get('/?order=id'))
        self.assertIsNone(OrderStringFilter().get_ordering(request, object()))


class TestPagination(SimpleTestCase):
    def test_page_window(self):
        self.assertEqual(page_window(1, 20), (0, 20))
        self.assertEqual(page_window(3, 20), (40, 20))

    def test_page_meta(self):
        self.assertEqual(
            dict(page_meta(45, 3, 20)),
            {'totalItems': 45, 'totalPages': 3, 'currentPage': 3, 'pageSize': 20}
        )
        self.assertEqual(page_meta(0, 1, 20)['totalPages'], 0)

    def test_invalid_values_fall_back_to_defaults(self):
        for value in (None, '', 'abc', '0', '-4', '1.5'):
            with self.subTest(value=value):
                self.assertEqual(to_positive_int(value, 7), 7)
        self.assertEqual(to_positive_int(' 12 ', 7), 12)
        self.assertEqual(to_positive_int(3, 7), 3)

    def test_paginate_list(self):
        paginator = PageLimitPagination()
        request = Request(APIRequestFactory().get('/?page=3&limit=4'))
        items = paginator.paginate_queryset(list(range(10)), request)
        self.assertEqual(items, [8, 9])

        response = paginator.get_paginated_response(items)
        self.assertEqual(response.data['items'], [8, 9])
        self.assertEqual(response.data['meta']['totalPages'], 3)

    def test_page_past_the_end_is_empty(self):
        paginator = PageLimitPagination()
        request = Request(APIRequestFactory().get('/?page=5&limit=4'))
        self.assertEqual(paginator.paginate_queryset(list(range(10)), request), [])
