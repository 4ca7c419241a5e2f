from django.test import override_settings
from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSAPITestCase
from ats.common.api.tests.factory import VacancyStatusFactory
from ats.recruitment.api.v1.tests.factory import CandidateFactory, VacancyFactory


class DashboardTestCase(ATSAPITestCase):
    url = reverse('api_v1:recruitment:dashboard')

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(self.recruiter)
        CandidateFactory.create_batch(3)
        CandidateFactory(deleted=True)
        VacancyFactory.create_batch(2)
        VacancyFactory(status=VacancyStatusFactory(name='Cerrada'))

    def test_dashboard(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {'active_candidates': 3, 'active_vacancies': 2}
        )

    @override_settings(ACTIVE_VACANCY_STATUSES=['Cerrada'])
    def test_active_statuses_are_configurable(self):
        response = self.client.get(self.url)
        self.assertEqual(response.data['active_vacancies'], 1)

    def test_requires_login(self):
        self.client.force_authenticate(None)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
