import logging

from django.db.models import Count, ProtectedError
from rest_framework.exceptions import ValidationError
from rest_framework.viewsets import ModelViewSet

from ats.recruitment.api.v1.filterset_classes import CompanyFilterSet
from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.api.v1.serializers.company import CompanySerializer
from ats.recruitment.models import Company

logger = logging.getLogger(__name__)


class CompanyViewSet(ModelViewSet):
    """
    create:

        {
            "name": "Acme",
            "status": "ACTIVO",
            "client_name": "John",
            "client_email": "john@acme.com",
            "client_phone": "+54 11 5555 5555"
        }
    """
    serializer_class = CompanySerializer
    permission_classes = [RecruitmentPermission]
    filterset_class = CompanyFilterSet
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'status': 'status',
        'vacancy_count': 'vacancy_count',
    }

    def get_queryset(self):
        return Company.objects.annotate(vacancy_count=Count('vacancies'))

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise ValidationError({
                'detail': 'Company has vacancies and can not be deleted.'
            })
        logger.info(f"{self.request.user} deleted company {instance.id}")
