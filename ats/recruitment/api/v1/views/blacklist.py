import logging

from django.db import transaction
from rest_framework.viewsets import ModelViewSet

from ats.recruitment.api.v1.filterset_classes import BlacklistFilterSet
from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.api.v1.serializers.blacklist import BlacklistSerializer
from ats.recruitment.models import Blacklist

logger = logging.getLogger(__name__)


class BlacklistViewSet(ModelViewSet):
    """
    create:
    `user` defaults to the logged in user.

        {
            "candidate": 1,
            "reason": "Did not show up"
        }
    """
    queryset = Blacklist.objects.select_related('candidate', 'user')
    serializer_class = BlacklistSerializer
    permission_classes = [RecruitmentPermission]
    filterset_class = BlacklistFilterSet
    ordering_fields_map = {
        'id': 'id',
        'created_at': 'created_at',
    }

    def perform_create(self, serializer):
        entry = serializer.save(
            user=serializer.validated_data.get('user') or self.request.user
        )
        logger.info(f"{self.request.user} blacklisted candidate {entry.candidate_id}")

    def perform_destroy(self, instance):
        candidate = instance.candidate
        with transaction.atomic():
            instance.delete()
            candidate.sync_blacklisted()
        logger.info(
            f"{self.request.user} removed blacklist entry {instance.id} "
            f"of candidate {candidate.id}"
        )
