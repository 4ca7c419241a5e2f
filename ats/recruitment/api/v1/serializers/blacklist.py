from django.db import transaction

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.api.v1.serializers.common import CandidateThinSerializer
from ats.recruitment.models import Blacklist
from ats.users.api.v1.serializers.user import UserThinSerializer


class BlacklistSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Blacklist
        fields = ('id', 'candidate', 'reason', 'user', 'created_at')
        read_only_fields = ('created_at',)
        create_only_fields = ('candidate',)
        extra_kwargs = {
            'user': {'required': False}
        }

    def create(self, validated_data):
        with transaction.atomic():
            entry = super().create(validated_data)
            entry.candidate.sync_blacklisted()
        return entry

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['candidate'] = CandidateThinSerializer(instance.candidate).data
        data['user'] = UserThinSerializer(instance.user).data if instance.user else None
        return data


class CandidateBlacklistCreateSerializer(DynamicFieldsModelSerializer):
    """Body of the blacklist action on a candidate"""

    class Meta:
        model = Blacklist
        fields = ('reason',)
