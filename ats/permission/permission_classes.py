from ats.permission.constants import ADMIN
from ats.permission.utils.factory import PermissionFactory

permission_factory = PermissionFactory()

AdminWritePermission = permission_factory.build_permission(
    "AdminWritePermission",
    limit_write_to=[ADMIN]
)
