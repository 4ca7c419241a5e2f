import logging

from django.db import transaction
from django.db.models import Prefetch
from rest_framework.viewsets import ModelViewSet

from ats.core.mixins.viewset_mixins import SerializerClassMapMixin
from ats.recruitment.api.v1.filterset_classes import VacancyFilterSet
from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.api.v1.serializers.vacancy import (
    VacancySerializer, VacancyWriteSerializer
)
from ats.recruitment.models import Vacancy, CandidateVacancy

logger = logging.getLogger(__name__)


class VacancyViewSet(SerializerClassMapMixin, ModelViewSet):
    """
    list:
    Lists vacancies with their filters, company and pipeline.

    filters -->
        id, title, description, status, company, created_by_id,
        assigned_to_id, filter_gender, filter_min_age, filter_max_age,
        filter_min_stars, filter_area_ids, filter_industry_ids,
        filter_seniority_ids, filter_countries, filter_provinces,
        filter_languages, search=<part of the title or id>

    create:
    `created_by` defaults to the logged in user.

        {
            "title": "Backend developer",
            "status": 1,
            "company": 1,
            "assigned_to": 2,
            "filters": {
                "min_stars": 3,
                "min_age": 20,
                "max_age": 40,
                "countries": ["Argentina"],
                "languages": ["English"],
                "area_ids": [1],
                "seniority_ids": [2, 3]
            }
        }

    update:
    Filter relation lists are replaced when sent, `[]` or `null` clear them.
    """
    serializer_class = VacancyWriteSerializer
    serializer_class_map = {
        'list': VacancySerializer,
        'retrieve': VacancySerializer,
    }
    permission_classes = [RecruitmentPermission]
    filterset_class = VacancyFilterSet
    ordering_fields_map = {
        'id': 'id',
        'title': 'title',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }

    def get_queryset(self):
        entries = CandidateVacancy.objects.filter(
            candidate__deleted=False
        ).select_related(
            'candidate', 'candidate_vacancy_status'
        ).order_by('candidate_vacancy_status__sort', 'id')
        return Vacancy.objects.select_related(
            'status', 'filters', 'company', 'created_by', 'assigned_to'
        ).prefetch_related(
            'filters__areas', 'filters__industries', 'filters__seniorities',
            Prefetch('candidates', queryset=entries, to_attr='active_entries')
        )

    def perform_create(self, serializer):
        vacancy = serializer.save(
            created_by=serializer.validated_data.get('created_by') or self.request.user
        )
        logger.info(f"{self.request.user} created vacancy {vacancy.id}")

    def perform_destroy(self, instance):
        # the vacancy and its pipeline go with the filters row
        with transaction.atomic():
            instance.filters.delete()
        logger.info(f"{self.request.user} deleted vacancy {instance.id}")
