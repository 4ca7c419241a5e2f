import logging

from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

logger = logging.getLogger(__name__)


class CustomTokenObtainSerializer(TokenObtainPairSerializer):
    """
    Email/password login.

    Unknown emails, wrong passwords and inactive accounts all fail with 401;
    `last_login` is stamped on success (SIMPLE_JWT['UPDATE_LAST_LOGIN']).
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['name'] = user.name
        token['email'] = user.email
        token['role'] = user.role
        token['active'] = user.is_active
        return token

    def validate(self, attrs):
        try:
            data = super().validate(attrs)
        except AuthenticationFailed:
            logger.warning(f"Failed login attempt for {attrs.get(self.username_field)}")
            raise
        logger.info(f"{self.user.email} logged in.")
        return data


class CustomTokenObtainView(TokenObtainPairView):
    serializer_class = CustomTokenObtainSerializer
