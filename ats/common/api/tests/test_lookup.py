from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSAPITestCase
from ats.common.api.tests.factory import AreaFactory, CandidateSourceFactory
from ats.common.models import Area
from ats.recruitment.api.v1.tests.factory import CandidateFactory, VacancyFactory


class LookupTestCase(ATSAPITestCase):
    url = reverse('api_v1:commons:area-list')

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(self.admin)

    def test_create_area(self):
        response = self.client.post(self.url, {'name': 'Legal'})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['name'], 'Legal')

        response = self.client.post(self.url, {'name': 'Legal'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_search_area(self):
        AreaFactory(name='Ingenieria')
        AreaFactory(name='RRHH')

        response = self.client.get(self.url, {'name': 'inge'})
        self.assertEqual(
            [item['name'] for item in response.data['items']], ['Ingenieria']
        )

        response = self.client.get(self.url, {'order': 'name:desc'})
        self.assertEqual(
            [item['name'] for item in response.data['items']],
            ['RRHH', 'Ingenieria']
        )

        response = self.client.get(self.url, {'name': 'asdfasdfasdf'})
        self.assertFalse(response.data['items'])

    def test_recruiter_can_only_read(self):
        area = AreaFactory()
        self.client.force_authenticate(self.recruiter)

        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(self.url, {'name': 'Legal'})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.delete(
            reverse('api_v1:commons:area-detail', kwargs={'pk': area.id})
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Area.objects.filter(id=area.id).exists())

    def test_recruiter_can_register_files(self):
        self.client.force_authenticate(self.recruiter)
        response = self.client.post(
            reverse('api_v1:commons:candidate-file-list'),
            {'name': 'cv.pdf', 'url': 'https://files.example.com/cv.pdf'}
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_deleting_source_keeps_candidates(self):
        source = CandidateSourceFactory()
        candidate = CandidateFactory(source=source)
        response = self.client.delete(
            reverse('api_v1:commons:candidate-source-detail', kwargs={'pk': source.id})
        )
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        candidate.refresh_from_db()
        self.assertIsNone(candidate.source)

    def test_vacancy_status_in_use_can_not_be_deleted(self):
        vacancy = VacancyFactory()
        response = self.client.delete(
            reverse('api_v1:commons:vacancy-status-detail', kwargs={'pk': vacancy.status_id})
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
