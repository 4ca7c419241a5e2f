from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSAPITestCase
from ats.users.api.v1.tests.factory import UserFactory
from ats.users.models import User


class UserTestCase(ATSAPITestCase):
    list_url = reverse('api_v1:users:users-list')

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(self.admin)

    @staticmethod
    def detail_url(pk):
        return reverse('api_v1:users:users-detail', kwargs={'pk': pk})

    def test_create_user(self):
        response = self.client.post(self.list_url, {
            'email': 'new@example.com',
            'name': 'New Recruiter',
            'password': 'a-long-enough-password',
            'role': 'RECRUITER',
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertNotIn('password', response.data)
        self.assertTrue(response.data['active'])

        user = User.objects.get(email='new@example.com')
        self.assertTrue(user.check_password('a-long-enough-password'))

    def test_password_is_required_on_create(self):
        response = self.client.post(self.list_url, {
            'email': 'new@example.com',
            'name': 'New Recruiter',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data)

    def test_email_is_unique_ignoring_case(self):
        response = self.client.post(self.list_url, {
            'email': 'RECRUITER@example.com',
            'name': 'Copy',
            'password': 'a-long-enough-password',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)

    def test_change_password(self):
        response = self.client.patch(
            self.detail_url(self.recruiter.id),
            {'password': 'another-long-password'}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.recruiter.refresh_from_db()
        self.assertTrue(self.recruiter.check_password('another-long-password'))

    def test_admin_can_not_delete_self(self):
        response = self.client.delete(self.detail_url(self.admin.id))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        other = UserFactory()
        response = self.client.delete(self.detail_url(other.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_recruiter_can_only_read(self):
        self.client.force_authenticate(self.recruiter)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.patch(
            self.detail_url(self.recruiter.id), {'role': 'ADMIN'}
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_me(self):
        self.client.force_authenticate(self.recruiter)
        response = self.client.get(reverse('api_v1:users:users-me'))
        self.assertEqual(response.data['id'], self.recruiter.id)

    def test_filters(self):
        UserFactory(email='inactive@example.com', name='Gone', is_active=False)
        cases = [
            ('?role=ADMIN', ['admin@example.com']),
            ('?exclude_role=ADMIN', ['recruiter@example.com', 'inactive@example.com']),
            ('?active=false', ['inactive@example.com']),
            ('?email=recruit', ['recruiter@example.com']),
            ('?name=gon', ['inactive@example.com']),
        ]
        for query, expected in cases:
            with self.subTest(query=query):
                response = self.client.get(self.list_url + query)
                self.assertEqual(
                    sorted(item['email'] for item in response.data['items']),
                    sorted(expected)
                )

    def test_order_by_unknown_key(self):
        response = self.client.get(self.list_url, {'order': 'password:asc'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
