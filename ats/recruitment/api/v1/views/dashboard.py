from django.conf import settings
from rest_framework.response import Response
from rest_framework.views import APIView

from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.models import Candidate, Vacancy


class DashboardView(APIView):
    """Headline counts for the landing page"""
    permission_classes = [RecruitmentPermission]

    def get(self, request, *args, **kwargs):
        return Response({
            'active_candidates': Candidate.objects.filter(deleted=False).count(),
            'active_vacancies': Vacancy.objects.filter(
                status__name__in=settings.ACTIVE_VACANCY_STATUSES
            ).count(),
        })
