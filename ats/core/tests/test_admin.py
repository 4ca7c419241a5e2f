from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import TestCase
from rangefilter.filters import DateRangeFilter

from ats.recruitment.api.v1.tests.factory import CandidateFactory
from ats.recruitment.models import Candidate, Company, Vacancy

User = get_user_model()


class AdminSiteTestCase(TestCase):
    def test_models_use_date_range_filters(self):
        for model in (User, Candidate, Company, Vacancy):
            self.assertTrue(admin.site.is_registered(model))
            self.assertIn(
                ('created_at', DateRangeFilter),
                list(admin.site._registry[model].list_filter)
            )

    def test_candidate_changelist_renders(self):
        CandidateFactory()
        self.client.force_login(
            User.objects.create_superuser('root@example.com', 'password')
        )
        response = self.client.get('/dj-admin/recruitment/candidate/')
        self.assertEqual(response.status_code, 200)
