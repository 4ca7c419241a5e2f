import logging

from rest_framework.permissions import BasePermission, SAFE_METHODS

from ats.permission.constants import ROLE_CHOICES

logger = logging.getLogger(__name__)

VALID_ROLES = {role for role, _ in ROLE_CHOICES}


class RolePermissionBase(BasePermission):
    """Base of the permission classes built by :class:`PermissionFactory`"""
    methods = {}

    def get_user_role(self, request):
        return getattr(request.user, 'role', None)

    def check_roles(self, request, roles):
        if not roles:
            return True
        if getattr(request.user, 'is_superuser', False):
            return True
        return self.get_user_role(request) in roles

    def check_method_permission(self, request, view):
        return self.check_roles(request, self.methods.get(request.method.lower()))

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        allowed = self.check_method_permission(request, view)
        if not allowed:
            logger.debug(
                f"{request.user} with role {self.get_user_role(request)} denied "
                f"{request.method} on {view.__class__.__name__}"
            )
        return allowed


class PermissionFactory:
    """
    Build role based DRF permission classes.

    .. code-block:: python

        AreaPermission = permission_factory.build_permission(
            'AreaPermission',
            limit_write_to=[ADMIN]
        )
    """
    http_method_names = ['get', 'post', 'put', 'patch', 'delete', 'head',
                         'options', 'trace']

    def build_permission(self, name,
                         allowed_to=None,
                         limit_read_to=None,
                         limit_write_to=None):
        """
        Create and return permission class with given configurations

        :param name: Name of the class
        :type name: str

        :param allowed_to: list of roles for all methods
        :type allowed_to: list

        :param limit_read_to: list of roles for safe methods
            [get, options, head]
        :type limit_read_to: list

        :param limit_write_to: list of roles for create and update
            i.e other methods than safe methods
        :type limit_write_to: list
        """
        methods = self.get_methods(
            self.parse_roles(allowed_to),
            self.parse_roles(limit_read_to),
            self.parse_roles(limit_write_to),
        )
        return type(str(name), (RolePermissionBase,), {
            'methods': methods,
        })

    def get_methods(self, allowed_to, limit_read_to, limit_write_to):
        safe_methods = {method.lower() for method in SAFE_METHODS}
        writable_methods = set(self.http_method_names) - safe_methods
        permission_methods = {}

        if allowed_to:
            for method in self.http_method_names:
                permission_methods.update({method: allowed_to})

        if limit_read_to:
            for method in safe_methods:
                permission_methods.update({method: limit_read_to})

        if limit_write_to:
            for method in writable_methods:
                permission_methods.update({method: limit_write_to})

        return permission_methods

    @staticmethod
    def parse_roles(roles):
        if not roles:
            return None
        if not isinstance(roles, (list, tuple, set)):
            roles = [roles]
        unknown = set(roles) - VALID_ROLES
        assert not unknown, f"Unknown roles {unknown}"
        return set(roles)
