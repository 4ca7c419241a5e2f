from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSAPITestCase
from ats.recruitment.api.v1.tests.factory import CompanyFactory, VacancyFactory
from ats.recruitment.constants import INACTIVO


class CompanyTestCase(ATSAPITestCase):
    list_url = reverse('api_v1:recruitment:company-list')

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(self.recruiter)

    def test_create_company(self):
        response = self.client.post(self.list_url, {
            'name': 'Acme',
            'client_name': 'John',
            'client_email': 'john@acme.com',
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'ACTIVO')
        self.assertEqual(response.data['vacancy_count'], 0)

    def test_vacancy_count_and_ordering(self):
        busy = CompanyFactory(name='Busy')
        idle = CompanyFactory(name='Idle', status=INACTIVO)
        VacancyFactory.create_batch(2, company=busy)

        response = self.client.get(self.list_url, {'order': 'vacancy_count:desc'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [(item['id'], item['vacancy_count']) for item in response.data['items']],
            [(busy.id, 2), (idle.id, 0)]
        )

        response = self.client.get(self.list_url, {'status': INACTIVO})
        self.assertEqual([item['id'] for item in response.data['items']], [idle.id])

        response = self.client.get(self.list_url, {'name': 'bus'})
        self.assertEqual([item['id'] for item in response.data['items']], [busy.id])

    def test_company_with_vacancies_can_not_be_deleted(self):
        company = CompanyFactory()
        VacancyFactory(company=company)
        url = reverse('api_v1:recruitment:company-detail', kwargs={'pk': company.id})
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
