from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.models import Company


class CompanySerializer(DynamicFieldsModelSerializer):
    vacancy_count = serializers.SerializerMethodField()

    class Meta:
        model = Company
        fields = (
            'id', 'name', 'description', 'status', 'client_name',
            'client_email', 'client_phone', 'vacancy_count'
        )

    @staticmethod
    def get_vacancy_count(obj):
        # list querysets are annotated
        count = getattr(obj, 'vacancy_count', None)
        if count is None:
            count = obj.vacancies.count()
        return count
