import logging

from django.db.models import ProtectedError
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ModelViewSet

from ats.common.api.filters import NameFilterSet
from ats.common.api.serializers.lookup import (
    AreaSerializer, IndustrySerializer, SenioritySerializer,
    CandidateSourceSerializer, VacancyStatusSerializer,
    CandidateFileSerializer
)
from ats.common.models import (
    Area, Industry, Seniority, CandidateSource,
    VacancyStatus, CandidateFile
)
from ats.permission.permission_classes import AdminWritePermission

logger = logging.getLogger(__name__)


class LookupViewSet(ModelViewSet):
    """
    list:
    Lists taxonomy entries.

        {
            "items": [{"id": 1, "name": "IT"}],
            "meta": {"totalItems": 1, "totalPages": 1, "currentPage": 1, "pageSize": 100}
        }

    filters -->
        id=1, name=<case insensitive part of the name>

    ordering -->
        order=id:asc, order=name:desc

    create:
    Admins only.

        {
            "name": "Ingenieria"
        }
    """
    permission_classes = [AdminWritePermission]
    filterset_class = NameFilterSet
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
    }

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise ValidationError({
                'detail': f"{instance} is in use and can not be deleted."
            })
        logger.info(f"Deleted {instance._meta.verbose_name} {instance.id} ({instance})")


class AreaViewSet(LookupViewSet):
    queryset = Area.objects.all()
    serializer_class = AreaSerializer


class IndustryViewSet(LookupViewSet):
    queryset = Industry.objects.all()
    serializer_class = IndustrySerializer


class SeniorityViewSet(LookupViewSet):
    queryset = Seniority.objects.all()
    serializer_class = SenioritySerializer


class CandidateSourceViewSet(LookupViewSet):
    queryset = CandidateSource.objects.all()
    serializer_class = CandidateSourceSerializer


class VacancyStatusViewSet(LookupViewSet):
    queryset = VacancyStatus.objects.all()
    serializer_class = VacancyStatusSerializer


class CandidateFileViewSet(LookupViewSet):
    """
    File references attached to candidates. Any authenticated user may
    register one.

        {
            "name": "cv.pdf",
            "url": "https://files.example.com/cv.pdf"
        }
    """
    queryset = CandidateFile.objects.all()
    serializer_class = CandidateFileSerializer
    permission_classes = [IsAuthenticated]
