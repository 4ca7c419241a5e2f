from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.api.v1.serializers.common import CandidateThinSerializer
from ats.recruitment.models import (
    Candidate, CandidateVacancyStatus, CandidateVacancy
)
from ats.recruitment.utils.pipeline import (
    create_status, update_status, initial_status
)


class CandidateVacancyStatusSerializer(DynamicFieldsModelSerializer):
    """
    Pipeline status. `sort` is the 0 based position in the pipeline, saving a
    status at a taken position shifts the others to keep positions contiguous.
    """
    sort = serializers.IntegerField(min_value=0, required=False)
    is_initial = serializers.BooleanField(required=False)

    class Meta:
        model = CandidateVacancyStatus
        fields = ('id', 'name', 'sort', 'is_initial')

    def create(self, validated_data):
        return create_status(**validated_data)

    def update(self, instance, validated_data):
        return update_status(instance.id, **validated_data)


class CandidateVacancySerializer(DynamicFieldsModelSerializer):
    candidate = serializers.PrimaryKeyRelatedField(
        queryset=Candidate.objects.filter(deleted=False)
    )
    candidate_vacancy_status = serializers.PrimaryKeyRelatedField(
        queryset=CandidateVacancyStatus.objects.all(),
        required=False
    )

    class Meta:
        model = CandidateVacancy
        fields = (
            'id', 'candidate', 'vacancy', 'candidate_vacancy_status',
            'notes', 'created_at', 'updated_at'
        )
        read_only_fields = ('created_at', 'updated_at')

    def get_fields(self):
        fields = super().get_fields()
        if self.instance is not None:
            fields['candidate'].read_only = True
            fields['vacancy'].read_only = True
        return fields

    def validate(self, attrs):
        if not self.instance and not attrs.get('candidate_vacancy_status'):
            status = initial_status()
            if not status:
                raise serializers.ValidationError({
                    'candidate_vacancy_status': 'No pipeline status has been configured.'
                })
            attrs['candidate_vacancy_status'] = status
        return attrs


class PipelineEntrySerializer(DynamicFieldsModelSerializer):
    """Pipeline entry as listed inside a vacancy"""
    candidate = CandidateThinSerializer()
    candidate_vacancy_status = CandidateVacancyStatusSerializer()

    class Meta:
        model = CandidateVacancy
        fields = (
            'id', 'candidate', 'candidate_vacancy_status', 'notes',
            'created_at', 'updated_at'
        )
