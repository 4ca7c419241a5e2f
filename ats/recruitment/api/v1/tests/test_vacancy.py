from django.urls import reverse
from rest_framework import status

from ats.common.api.tests.common import ATSAPITestCase
from ats.common.api.tests.factory import (
    AreaFactory, SeniorityFactory, VacancyStatusFactory
)
from ats.recruitment.api.v1.tests.factory import (
    CompanyFactory, VacancyFactory, VacancyFiltersFactory,
    CandidateFactory, CandidateVacancyFactory, CandidateVacancyStatusFactory
)
from ats.recruitment.models import Vacancy, VacancyFilters, CandidateVacancy


class VacancyTestCase(ATSAPITestCase):
    list_url = reverse('api_v1:recruitment:vacancy-list')

    def setUp(self):
        super().setUp()
        self.client.force_authenticate(self.recruiter)
        self.company = CompanyFactory()
        self.status = VacancyStatusFactory(name='Abierta')

    @staticmethod
    def detail_url(pk):
        return reverse('api_v1:recruitment:vacancy-detail', kwargs={'pk': pk})

    def test_create_vacancy(self):
        area = AreaFactory()
        seniorities = SeniorityFactory.create_batch(2)
        response = self.client.post(self.list_url, {
            'title': 'Backend developer',
            'status': self.status.id,
            'company': self.company.id,
            'assigned_to': self.admin.id,
            'filters': {
                'min_stars': 3,
                'min_age': 20,
                'max_age': 40,
                'countries': ['Argentina'],
                'languages': ['English'],
                'area_ids': [area.id],
                'seniority_ids': [seniority.id for seniority in seniorities],
            },
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['created_by']['id'], self.recruiter.id)
        self.assertEqual(response.data['assigned_to']['id'], self.admin.id)
        self.assertEqual(response.data['company']['id'], self.company.id)
        self.assertEqual(response.data['status']['name'], 'Abierta')
        self.assertEqual(response.data['filters']['countries'], ['Argentina'])
        self.assertEqual(response.data['filters']['min_stars'], 3)
        self.assertEqual(len(response.data['filters']['seniorities']), 2)
        self.assertEqual(response.data['candidates'], [])

    def test_create_without_filters(self):
        response = self.client.post(self.list_url, {
            'title': 'Tester',
            'status': self.status.id,
            'company': self.company.id,
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['filters']['areas'], [])

    def test_invalid_age_range(self):
        response = self.client.post(self.list_url, {
            'title': 'Tester',
            'status': self.status.id,
            'company': self.company.id,
            'filters': {'min_age': 40, 'max_age': 20},
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(VacancyFilters.objects.exists())

    def test_update_filter_relations(self):
        area = AreaFactory()
        vacancy = VacancyFactory(company=self.company, status=self.status)
        vacancy.filters.areas.set([area])
        vacancy.filters.seniorities.set([SeniorityFactory()])

        response = self.client.patch(self.detail_url(vacancy.id), {
            'title': 'Renamed',
            'filters': {'area_ids': [], 'seniority_ids': None, 'gender': 'Female'},
        })
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        vacancy.filters.refresh_from_db()
        self.assertFalse(vacancy.filters.areas.exists())
        self.assertFalse(vacancy.filters.seniorities.exists())
        self.assertEqual(vacancy.filters.gender, 'Female')
        self.assertEqual(response.data['title'], 'Renamed')

    def test_delete_vacancy(self):
        vacancy = VacancyFactory(company=self.company, status=self.status)
        filters_id = vacancy.filters_id
        CandidateVacancyFactory(vacancy=vacancy)

        response = self.client.delete(self.detail_url(vacancy.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Vacancy.objects.filter(id=vacancy.id).exists())
        self.assertFalse(VacancyFilters.objects.filter(id=filters_id).exists())
        self.assertFalse(CandidateVacancy.objects.exists())

        response = self.client.delete(self.detail_url(vacancy.id))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_pipeline_leaves_out_deleted_candidates(self):
        vacancy = VacancyFactory(company=self.company, status=self.status)
        stage = CandidateVacancyStatusFactory(sort=0)
        active = CandidateVacancyFactory(
            vacancy=vacancy, candidate_vacancy_status=stage
        )
        CandidateVacancyFactory(
            vacancy=vacancy, candidate_vacancy_status=stage,
            candidate=CandidateFactory(deleted=True)
        )

        for url in (self.detail_url(vacancy.id), self.list_url):
            with self.subTest(url=url):
                response = self.client.get(url)
                data = response.data if url != self.list_url else response.data['items'][0]
                self.assertEqual(
                    [entry['id'] for entry in data['candidates']], [active.id]
                )
                self.assertEqual(
                    data['candidates'][0]['candidate_vacancy_status']['name'], stage.name
                )

    def test_filters(self):
        area = AreaFactory()
        java = VacancyFactory(
            title='Java developer', company=self.company, status=self.status,
            filters=VacancyFiltersFactory(gender='Female', languages=['English'])
        )
        java.filters.areas.set([area])
        python = VacancyFactory(
            title='Python developer', company=self.company, status=self.status,
            created_by=self.admin
        )

        cases = [
            ('?title=java', [java.id]),
            ('?filter_gender=female', [java.id]),
            ('?filter_languages=English', [java.id]),
            (f'?filter_area_ids={area.id}', [java.id]),
            (f'?created_by_id={self.admin.id}', [python.id]),
            (f'?search={python.id}', [python.id]),
            ('?search=developer', [java.id, python.id]),
            (f'?company={self.company.id}', [java.id, python.id]),
        ]
        for query, expected in cases:
            with self.subTest(query=query):
                response = self.client.get(self.list_url + query)
                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual(
                    sorted(item['id'] for item in response.data['items']),
                    sorted(expected)
                )
