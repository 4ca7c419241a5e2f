from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.api.v1.serializers.common import CandidateThinSerializer
from ats.recruitment.models import Comment
from ats.recruitment.utils.comment import (
    validate_comment_owner, validate_comment_age
)
from ats.users.api.v1.serializers.user import UserThinSerializer


class CommentSerializer(DynamicFieldsModelSerializer):
    """
    Comment on a candidate. The author is always the requesting user, only the
    author may edit it and only within the edit window.
    """

    class Meta:
        model = Comment
        fields = ('id', 'candidate', 'comment', 'user', 'created_at')
        read_only_fields = ('user', 'created_at')
        create_only_fields = ('candidate',)

    def validate(self, attrs):
        if self.instance:
            validate_comment_owner(self.instance, self.context['request'].user)
            validate_comment_age(self.instance)
        return super().validate(attrs)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['candidate'] = CandidateThinSerializer(instance.candidate).data
        data['user'] = UserThinSerializer(instance.user).data if instance.user else None
        return data
