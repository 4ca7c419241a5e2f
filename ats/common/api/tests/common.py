import contextlib

from django.db import transaction
from rest_framework.test import APITestCase

from ats.permission.constants import ADMIN, RECRUITER
from ats.users.api.v1.tests.factory import UserFactory


class ATSAPITestCase(APITestCase):
    """
    API test case with an admin and a recruiter.

    `users` holds ``(email, password, role)`` tuples, the first admin is
    available as `self.admin` and the first recruiter as `self.recruiter`.
    """
    users = [
        ('admin@example.com', 'password', ADMIN),
        ('recruiter@example.com', 'password', RECRUITER),
    ]

    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.created_users = [
            UserFactory(email=email, password=password, role=role)
            for email, password, role in cls.users
        ]
        cls.admin = next(
            (user for user in cls.created_users if user.role == ADMIN), None
        )
        cls.recruiter = next(
            (user for user in cls.created_users if user.role == RECRUITER), None
        )

    @contextlib.contextmanager
    def atomicSubTest(self, **kwargs):
        """
        subTest that rolls back to the savepoint it was opened at.

        .. code-block:: python

            for case in cases:
                with self.atomicSubTest(case=case):
                    run_test(case)
        """
        savepoint = transaction.savepoint()
        try:
            with self.subTest(**kwargs):
                yield savepoint
        finally:
            transaction.savepoint_rollback(savepoint)
