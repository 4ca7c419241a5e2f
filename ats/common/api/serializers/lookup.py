from ats.common.models import (
    Area, Industry, Seniority, CandidateSource,
    VacancyStatus, CandidateFile
)
from ats.core.mixins.serializers import DynamicFieldsModelSerializer


class AreaSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Area
        fields = ('id', 'name')


class IndustrySerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Industry
        fields = ('id', 'name')


class SenioritySerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Seniority
        fields = ('id', 'name')


class CandidateSourceSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = CandidateSource
        fields = ('id', 'name')


class VacancyStatusSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = VacancyStatus
        fields = ('id', 'name')


class CandidateFileSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = CandidateFile
        fields = ('id', 'name', 'url')
