from django.contrib.auth.base_user import BaseUserManager

from ats.permission.constants import ADMIN


class UserManager(BaseUserManager):

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Users must have an email address')
        extra_fields.setdefault('is_superuser', False)
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, name=''):
        return self.create_user(
            email=email,
            password=password,
            name=name,
            role=ADMIN,
            is_superuser=True,
            is_active=True,
        )

    def get_by_natural_key(self, _email):
        return self.get(email__iexact=_email)
