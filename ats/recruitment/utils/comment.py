from datetime import timedelta

from django.conf import settings
from rest_framework.exceptions import ValidationError

from ats.core.utils.common import get_today
from ats.recruitment.constants import USER_ID_MISMATCH, COMMENT_TOO_OLD


def validate_comment_owner(comment, user):
    if comment.user_id != user.id:
        raise ValidationError({'user': USER_ID_MISMATCH})


def validate_comment_age(comment):
    """Comments can only be edited within `COMMENT_EDIT_WINDOW_HOURS` of posting"""
    window = timedelta(hours=settings.COMMENT_EDIT_WINDOW_HOURS)
    if comment.created_at < get_today(with_time=True) - window:
        raise ValidationError({'comment': COMMENT_TOO_OLD})
