import logging

from django.db.models import ProtectedError
from rest_framework.exceptions import ValidationError
from rest_framework.viewsets import ModelViewSet

from ats.recruitment.api.v1.filterset_classes import (
    CandidateVacancyFilterSet, CandidateVacancyStatusFilterSet
)
from ats.recruitment.api.v1.permissions import (
    RecruitmentPermission, CandidateVacancyStatusPermission
)
from ats.recruitment.api.v1.serializers.pipeline import (
    CandidateVacancyStatusSerializer, CandidateVacancySerializer
)
from ats.recruitment.models import CandidateVacancyStatus, CandidateVacancy
from ats.recruitment.utils.pipeline import delete_status

logger = logging.getLogger(__name__)


class CandidateVacancyStatusViewSet(ModelViewSet):
    """
    list:
    Pipeline statuses, by default in pipeline order.

    create:
    Inserts the status at `sort` (0 based, defaults to 0), statuses at or
    after it move one place down. Admins only.

        {
            "name": "Interview",
            "sort": 1,
            "is_initial": false
        }

    update:
    Sending `sort` moves the status, the ones in between shift to close the
    gap. `is_initial=true` unsets it on every other status.

    destroy:
    Statuses after the deleted one move one place up.
    """
    queryset = CandidateVacancyStatus.objects.all()
    serializer_class = CandidateVacancyStatusSerializer
    permission_classes = [CandidateVacancyStatusPermission]
    filterset_class = CandidateVacancyStatusFilterSet
    default_order = 'sort:asc'
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'sort': 'sort',
    }

    def perform_destroy(self, instance):
        try:
            delete_status(instance.id)
        except ProtectedError:
            raise ValidationError({
                'detail': f"{instance.name} is in use and can not be deleted."
            })


class CandidateVacancyViewSet(ModelViewSet):
    """
    create:
    Starts at the initial pipeline status when no status is sent.

        {
            "candidate": 1,
            "vacancy": 1,
            "notes": ""
        }
    """
    queryset = CandidateVacancy.objects.select_related(
        'candidate', 'vacancy', 'candidate_vacancy_status'
    )
    serializer_class = CandidateVacancySerializer
    permission_classes = [RecruitmentPermission]
    filterset_class = CandidateVacancyFilterSet
    ordering_fields_map = {
        'id': 'id',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }

    def perform_create(self, serializer):
        entry = serializer.save()
        logger.info(
            f"{self.request.user} added candidate {entry.candidate_id} to "
            f"vacancy {entry.vacancy_id} at {entry.candidate_vacancy_status}"
        )
