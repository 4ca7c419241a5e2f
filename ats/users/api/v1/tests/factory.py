import factory
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from ats.permission.constants import RECRUITER

User = get_user_model()


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('email',)

    email = factory.Sequence(lambda n: f'user{n}@example.com')
    name = factory.Faker('name')
    role = RECRUITER
    is_active = True
    password = factory.PostGenerationMethodCall('set_password', 'password')
