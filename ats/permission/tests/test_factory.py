from types import SimpleNamespace

from django.test import SimpleTestCase
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from ats.permission.constants import ADMIN, RECRUITER
from ats.permission.utils.factory import PermissionFactory


def make_user(role, is_superuser=False):
    return SimpleNamespace(role=role, is_authenticated=True, is_superuser=is_superuser)


class PermissionFactoryTestCase(SimpleTestCase):
    factory = PermissionFactory()

    def check(self, permission_class, method, user):
        request = Request(getattr(APIRequestFactory(), method)('/'))
        request.user = user
        view = SimpleNamespace()
        return permission_class().has_permission(request, view)

    def test_limit_write_to(self):
        permission = self.factory.build_permission(
            'WritePermission', limit_write_to=[ADMIN]
        )
        recruiter, admin = make_user(RECRUITER), make_user(ADMIN)

        self.assertTrue(self.check(permission, 'get', recruiter))
        self.assertFalse(self.check(permission, 'post', recruiter))
        self.assertFalse(self.check(permission, 'delete', recruiter))
        self.assertTrue(self.check(permission, 'post', admin))

    def test_read_and_write_limits_combine(self):
        permission = self.factory.build_permission(
            'StatusPermission',
            limit_read_to=[ADMIN, RECRUITER],
            limit_write_to=[ADMIN]
        )
        self.assertEqual(
            permission.methods,
            {
                **{method: {ADMIN, RECRUITER} for method in ('get', 'head', 'options')},
                **{method: {ADMIN} for method in
                   ('post', 'put', 'patch', 'delete', 'trace')},
            }
        )
        self.assertTrue(self.check(permission, 'get', make_user(RECRUITER)))
        self.assertFalse(self.check(permission, 'patch', make_user(RECRUITER)))
        self.assertTrue(self.check(permission, 'patch', make_user(ADMIN)))

    def test_superuser_passes(self):
        permission = self.factory.build_permission(
            'AdminPermission', allowed_to=[ADMIN]
        )
        self.assertTrue(
            self.check(permission, 'get', make_user(RECRUITER, is_superuser=True))
        )

    def test_anonymous_user_is_rejected(self):
        permission = self.factory.build_permission('OpenPermission')
        anonymous = SimpleNamespace(is_authenticated=False)
        self.assertFalse(self.check(permission, 'get', anonymous))

    def test_unknown_role(self):
        with self.assertRaises(AssertionError):
            self.factory.build_permission('BadPermission', allowed_to=['OWNER'])
