from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _

from ats.permission.constants import ROLE_CHOICES, RECRUITER, ADMIN
from ..managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Recruiting staff account.

    Logs in with email and password; `role` decides what the account may
    change (see ats.permission).
    """
    email = models.EmailField(
        _('user email'), max_length=255, unique=True,
    )
    name = models.CharField(_('Name'), max_length=255, blank=True)
    role = models.CharField(
        max_length=20, choices=ROLE_CHOICES, default=RECRUITER, db_index=True
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        ordering = ('id',)

    def __str__(self):
        return self.name or self.email

    def get_short_name(self):
        return self.name or self.email

    def get_full_name(self):
        return self.name

    @property
    def is_staff(self):
        return self.is_superuser or self.role == ADMIN

    @property
    def is_admin(self):
        return self.role == ADMIN
