import logging

from rest_framework.viewsets import ModelViewSet

from ats.recruitment.api.v1.filterset_classes import CommentFilterSet
from ats.recruitment.api.v1.permissions import RecruitmentPermission
from ats.recruitment.api.v1.serializers.comment import CommentSerializer
from ats.recruitment.models import Comment
from ats.recruitment.utils.comment import validate_comment_owner

logger = logging.getLogger(__name__)


class CommentViewSet(ModelViewSet):
    """
    create:
    The author is the logged in user.

        {
            "candidate": 1,
            "comment": "Great interview"
        }

    update:
    Only the author can edit a comment, and only within a day of posting it.

    destroy:
    Only the author can delete a comment.
    """
    queryset = Comment.objects.select_related('candidate', 'user')
    serializer_class = CommentSerializer
    permission_classes = [RecruitmentPermission]
    filterset_class = CommentFilterSet
    ordering_fields_map = {
        'id': 'id',
        'created_at': 'created_at',
    }

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    def perform_destroy(self, instance):
        validate_comment_owner(instance, self.request.user)
        logger.info(f"{self.request.user} deleted comment {instance.id}")
        instance.delete()
