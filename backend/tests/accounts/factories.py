"""
Factories for accounts app models.

Used in tests to create test data.
"""

import factory
from factory.django import DjangoModelFactory

from apps.accounts.models import ProfessionalProfile, Role, User


class UserFactory(DjangoModelFactory):
    """Factory for User model."""

    class Meta:
        model = User

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    name = factory.Faker("name")
    role = Role.MEMBER
    is_active = True
    is_staff = False


class ProfessionalProfileFactory(DjangoModelFactory):
    """Factory for ProfessionalProfile model."""

    class Meta:
        model = ProfessionalProfile

    user = factory.SubFactory(UserFactory)
    service_type = "haulage"
    routes = factory.LazyFunction(lambda: ["Kano-Lagos"])
    capacity = "30t"
    verified = False
