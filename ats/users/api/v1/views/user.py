import logging

from django.contrib.auth import get_user_model
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from ats.permission.permission_classes import AdminWritePermission
from ats.users.api.v1.filters import UserFilterSet
from ats.users.api.v1.serializers.user import UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class UserViewSet(ModelViewSet):
    """
    list:
    Lists users, password is never returned.

    filters -->
        email, name (case insensitive part), active=true|false,
        role=ADMIN|RECRUITER, exclude_role=ADMIN|RECRUITER

    create:
    Admins only.

        {
            "email": "recruiter@example.com",
            "name": "Recruiter",
            "password": "secret-password",
            "role": "RECRUITER",
            "active": true
        }

    me:
    Details of the logged in user.
    """
    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [AdminWritePermission]
    filterset_class = UserFilterSet
    ordering_fields_map = {
        'id': 'id',
        'name': 'name',
        'email': 'email',
        'created_at': 'created_at',
        'last_login': 'last_login',
    }

    @action(detail=False, methods=['get'])
    def me(self, request, *args, **kwargs):
        return Response(self.get_serializer(request.user).data)

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info(f"{self.request.user} created user {user.email} as {user.role}")

    def perform_destroy(self, instance):
        if instance == self.request.user:
            raise ValidationError({'detail': 'You can not delete yourself.'})
        logger.info(f"{self.request.user} deleted user {instance.email}")
        instance.delete()
