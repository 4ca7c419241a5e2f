from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers

from ats.common.api.serializers.lookup import (
    AreaSerializer, IndustrySerializer, SenioritySerializer,
    VacancyStatusSerializer
)
from ats.common.models import Area, Industry, Seniority, VacancyStatus
from ats.core.mixins.serializers import (
    DynamicFieldsModelSerializer, ReadSerializerMixin
)
from ats.recruitment.api.v1.serializers.common import CompanyThinSerializer
from ats.recruitment.api.v1.serializers.pipeline import PipelineEntrySerializer
from ats.recruitment.models import Vacancy, VacancyFilters, Company
from ats.users.api.v1.serializers.user import UserThinSerializer

USER = get_user_model()

FILTER_RELATIONS = ('areas', 'industries', 'seniorities')
FILTER_ARRAYS = ('countries', 'provinces', 'languages')


class VacancyFiltersSerializer(DynamicFieldsModelSerializer):
    areas = AreaSerializer(many=True, read_only=True)
    industries = IndustrySerializer(many=True, read_only=True)
    seniorities = SenioritySerializer(many=True, read_only=True)
    min_stars = serializers.DecimalField(
        max_digits=3, decimal_places=1, coerce_to_string=False,
        read_only=True
    )

    class Meta:
        model = VacancyFilters
        fields = (
            'id', 'min_stars', 'gender', 'min_age', 'max_age', 'countries',
            'provinces', 'languages', 'areas', 'industries', 'seniorities'
        )


class VacancyFiltersWriteSerializer(DynamicFieldsModelSerializer):
    area_ids = serializers.ManyRelatedField(
        child_relation=serializers.PrimaryKeyRelatedField(
            queryset=Area.objects.all()
        ),
        source='areas',
        required=False,
        allow_null=True
    )
    industry_ids = serializers.ManyRelatedField(
        child_relation=serializers.PrimaryKeyRelatedField(
            queryset=Industry.objects.all()
        ),
        source='industries',
        required=False,
        allow_null=True
    )
    seniority_ids = serializers.ManyRelatedField(
        child_relation=serializers.PrimaryKeyRelatedField(
            queryset=Seniority.objects.all()
        ),
        source='seniorities',
        required=False,
        allow_null=True
    )
    countries = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False,
        allow_null=True
    )
    provinces = serializers.ListField(
        child=serializers.CharField(max_length=255), required=False,
        allow_null=True
    )
    languages = serializers.ListField(
        child=serializers.CharField(max_length=255), required=False,
        allow_null=True
    )
    min_stars = serializers.DecimalField(
        max_digits=3, decimal_places=1, min_value=0, required=False,
        allow_null=True, coerce_to_string=False
    )

    class Meta:
        model = VacancyFilters
        fields = (
            'min_stars', 'gender', 'min_age', 'max_age', 'countries',
            'provinces', 'languages', 'area_ids', 'industry_ids',
            'seniority_ids'
        )

    def validate(self, attrs):
        min_age, max_age = attrs.get('min_age'), attrs.get('max_age')
        if min_age is not None and max_age is not None and min_age > max_age:
            raise serializers.ValidationError({
                'max_age': 'Maximum age must not be lower than minimum age.'
            })
        return attrs


def save_vacancy_filters(data, instance=None):
    """
    Create or update a filters row.

    Sent relation lists replace the stored ones, `null` and `[]` clear them.
    """
    data = dict(data)
    relations = {
        name: data.pop(name) or []
        for name in FILTER_RELATIONS if name in data
    }
    for name in FILTER_ARRAYS:
        if name in data and data[name] is None:
            data[name] = []

    if instance is None:
        instance = VacancyFilters.objects.create(**data)
    else:
        for attr, value in data.items():
            setattr(instance, attr, value)
        instance.save()

    for name, values in relations.items():
        getattr(instance, name).set(values)
    return instance


class VacancySerializer(DynamicFieldsModelSerializer):
    status = VacancyStatusSerializer(read_only=True)
    filters = VacancyFiltersSerializer(read_only=True)
    company = CompanyThinSerializer(read_only=True)
    candidates = serializers.SerializerMethodField()
    created_by = UserThinSerializer(read_only=True)
    assigned_to = UserThinSerializer(read_only=True)

    class Meta:
        model = Vacancy
        fields = (
            'id', 'title', 'description', 'status', 'filters', 'company',
            'candidates', 'created_by', 'assigned_to', 'created_at',
            'updated_at'
        )

    def get_candidates(self, obj):
        # list and detail querysets prefetch the entries into `active_entries`
        entries = getattr(obj, 'active_entries', None)
        if entries is None:
            entries = obj.candidates.filter(candidate__deleted=False).select_related(
                'candidate', 'candidate_vacancy_status'
            )
        return PipelineEntrySerializer(entries, many=True, context=self.context).data


class VacancyWriteSerializer(ReadSerializerMixin, DynamicFieldsModelSerializer):
    status = serializers.PrimaryKeyRelatedField(queryset=VacancyStatus.objects.all())
    company = serializers.PrimaryKeyRelatedField(queryset=Company.objects.all())
    created_by = serializers.PrimaryKeyRelatedField(
        queryset=USER.objects.all(), required=False, allow_null=True
    )
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=USER.objects.all(), required=False, allow_null=True
    )
    filters = VacancyFiltersWriteSerializer(required=False)

    class Meta:
        model = Vacancy
        fields = (
            'id', 'title', 'description', 'status', 'filters', 'company',
            'created_by', 'assigned_to'
        )
        read_serializer_class = VacancySerializer

    def create(self, validated_data):
        filters_data = validated_data.pop('filters', None) or {}
        with transaction.atomic():
            filters = save_vacancy_filters(filters_data)
            return Vacancy.objects.create(filters=filters, **validated_data)

    def update(self, instance, validated_data):
        filters_data = validated_data.pop('filters', None)
        with transaction.atomic():
            if filters_data is not None:
                save_vacancy_filters(filters_data, instance=instance.filters)
            return super().update(instance, validated_data)
