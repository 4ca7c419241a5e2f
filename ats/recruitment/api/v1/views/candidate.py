import logging

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from ats.core.mixins.viewset_mixins import SerializerClassMapMixin
from ats.recruitment.api.v1.filterset_classes import CandidateFilterSet
from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.api.v1.serializers.blacklist import (
    CandidateBlacklistCreateSerializer
)
from ats.recruitment.api.v1.serializers.candidate import (
    CandidateSerializer, CandidateWriteSerializer, CandidateExistsSerializer
)
from ats.recruitment.api.v1.serializers.common import CandidateThinSerializer
from ats.recruitment.models import Candidate, Blacklist

logger = logging.getLogger(__name__)


class CandidateViewSet(SerializerClassMapMixin, ModelViewSet):
    """
    list:
    Lists candidates. Deleted and blacklisted candidates are left out unless
    `deleted=true` or `blacklisted=true` is sent.

    filters -->
        id, name, gender, short_description, email, linkedin, address,
        phone, document_number (case insensitive part),
        minimum_age, maximum_age, minimum_stars, maximum_stars,
        countries=AR,UY, provinces=Cordoba, languages=English,
        source_id, area_ids=1,2, industry_ids, seniority_ids,
        is_in_company, deleted, blacklisted

    ordering -->
        order=<id|name|email|stars|date_of_birth>:<asc|desc>

    create:

        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "country": "Argentina",
            "provinces": ["Cordoba"],
            "languages": ["English"],
            "source_id": 1,
            "stars": 4.5,
            "area_ids": [1, 2],
            "industry_ids": [1],
            "seniority_ids": [3],
            "file_ids": []
        }

    update:
    `area_ids`, `industry_ids` and `seniority_ids` are replaced when a non
    empty list is sent. `file_ids` is replaced whenever it is sent.

    destroy:
    Soft deletes the candidate.

    exists:
    ?name=<name> matches non deleted candidates ignoring case.

    blacklist:

        {
            "reason": "No show"
        }
    """
    queryset = Candidate.objects.select_related('source').prefetch_related(
        'areas', 'industries', 'seniorities', 'files',
        'blacklist__user', 'comments__user'
    )
    serializer_class = CandidateWriteSerializer
    serializer_class_map = {
        'list': CandidateSerializer,
        'retrieve': CandidateSerializer,
        'exists': CandidateExistsSerializer,
        'blacklist': CandidateBlacklistCreateSerializer,
    }
    permission_classes = [RecruitmentPermission]
    filterset_class = CandidateFilterSet
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'email': 'email',
        'stars': 'stars',
        'date_of_birth': 'date_of_birth',
    }

    def filter_queryset(self, queryset):
        # deleted and blacklisted candidates stay reachable by id
        if self.action != 'list':
            return queryset
        return super().filter_queryset(queryset)

    def perform_destroy(self, instance):
        instance.soft_delete()
        logger.info(f"{self.request.user} deleted candidate {instance.id}")

    @action(detail=False, methods=['get'])
    def exists(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        candidate = Candidate.objects.filter(
            deleted=False,
            name__iexact=serializer.validated_data['name']
        ).order_by('id').first()
        return Response({
            'exists': candidate is not None,
            'candidate': CandidateThinSerializer(candidate).data if candidate else None,
        })

    @action(detail=True, methods=['post'])
    def blacklist(self, request, *args, **kwargs):
        candidate = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            Blacklist.objects.create(
                candidate=candidate,
                user=request.user,
                **serializer.validated_data
            )
            candidate.sync_blacklisted()
        logger.info(f"{request.user} blacklisted candidate {candidate.id}")

        candidate = self.get_queryset().get(pk=candidate.pk)
        return Response(
            CandidateSerializer(candidate, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )
