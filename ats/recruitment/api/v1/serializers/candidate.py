from django.db import transaction
from rest_framework import serializers

from ats.common.api.serializers.lookup import (
    AreaSerializer, IndustrySerializer, SenioritySerializer,
    CandidateSourceSerializer, CandidateFileSerializer
)
from ats.common.models import (
    Area, Industry, Seniority, CandidateSource, CandidateFile
)
from ats.core.mixins.serializers import (
    DynamicFieldsModelSerializer, ReadSerializerMixin
)
from ats.recruitment.models import Candidate, Comment, Blacklist
from ats.users.api.v1.serializers.user import UserThinSerializer

# M2M relations that are only replaced when a non empty list is sent
REPLACE_WHEN_NON_EMPTY = ('areas', 'industries', 'seniorities')


class CandidateCommentSerializer(DynamicFieldsModelSerializer):
    user = UserThinSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ('id', 'comment', 'user', 'created_at')


class CandidateBlacklistSerializer(DynamicFieldsModelSerializer):
    user = UserThinSerializer(read_only=True)

    class Meta:
        model = Blacklist
        fields = ('id', 'reason', 'user', 'created_at')


class CandidateSerializer(DynamicFieldsModelSerializer):
    source = CandidateSourceSerializer(read_only=True)
    areas = AreaSerializer(many=True, read_only=True)
    industries = IndustrySerializer(many=True, read_only=True)
    seniorities = SenioritySerializer(many=True, read_only=True)
    files = CandidateFileSerializer(many=True, read_only=True)
    blacklist = CandidateBlacklistSerializer(many=True, read_only=True)
    comments = CandidateCommentSerializer(many=True, read_only=True)
    stars = serializers.DecimalField(
        max_digits=3, decimal_places=1, coerce_to_string=False,
        read_only=True
    )

    class Meta:
        model = Candidate
        fields = (
            'id', 'name', 'image', 'date_of_birth', 'gender',
            'short_description', 'email', 'linkedin', 'address',
            'document_number', 'phone', 'country', 'provinces', 'languages',
            'source', 'stars', 'is_in_company', 'deleted', 'blacklisted',
            'areas', 'industries', 'seniorities', 'files', 'blacklist',
            'comments', 'created_at', 'modified_at'
        )
        read_only_fields = fields


class CandidateWriteSerializer(ReadSerializerMixin, DynamicFieldsModelSerializer):
    source_id = serializers.PrimaryKeyRelatedField(
        source='source',
        queryset=CandidateSource.objects.all(),
        required=False,
        allow_null=True
    )
    area_ids = serializers.PrimaryKeyRelatedField(
        source='areas',
        queryset=Area.objects.all(),
        many=True,
        required=False
    )
    industry_ids = serializers.PrimaryKeyRelatedField(
        source='industries',
        queryset=Industry.objects.all(),
        many=True,
        required=False
    )
    seniority_ids = serializers.PrimaryKeyRelatedField(
        source='seniorities',
        queryset=Seniority.objects.all(),
        many=True,
        required=False
    )
    file_ids = serializers.PrimaryKeyRelatedField(
        source='files',
        queryset=CandidateFile.objects.all(),
        many=True,
        required=False
    )
    provinces = serializers.ListField(
        child=serializers.CharField(max_length=255), required=False
    )
    languages = serializers.ListField(
        child=serializers.CharField(max_length=255), required=False
    )
    stars = serializers.DecimalField(
        max_digits=3, decimal_places=1, min_value=0, required=False,
        allow_null=True, coerce_to_string=False
    )

    class Meta:
        model = Candidate
        fields = (
            'id', 'name', 'image', 'date_of_birth', 'gender',
            'short_description', 'email', 'linkedin', 'address',
            'document_number', 'phone', 'country', 'provinces', 'languages',
            'source_id', 'stars', 'is_in_company', 'area_ids',
            'industry_ids', 'seniority_ids', 'file_ids'
        )
        read_serializer_class = CandidateSerializer

    @staticmethod
    def pop_relations(validated_data):
        return {
            name: validated_data.pop(name)
            for name in REPLACE_WHEN_NON_EMPTY + ('files',)
            if name in validated_data
        }

    def create(self, validated_data):
        relations = self.pop_relations(validated_data)
        with transaction.atomic():
            candidate = super().create(validated_data)
            for name, values in relations.items():
                getattr(candidate, name).set(values)
        return candidate

    def update(self, instance, validated_data):
        relations = self.pop_relations(validated_data)
        with transaction.atomic():
            instance = super().update(instance, validated_data)
            for name, values in relations.items():
                if name in REPLACE_WHEN_NON_EMPTY and not values:
                    continue
                getattr(instance, name).set(values)
        return instance


class CandidateExistsSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
