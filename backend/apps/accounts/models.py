"""
Accounts models - users and professional profiles.
"""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models

from apps.core.models import IdentifiedModel, TimestampedModel


class Role(models.TextChoices):
    """Platform-wide user role."""

    ADMIN = "ADMIN", "Admin"
    MEMBER = "MEMBER", "Member"
    VERIFIED_PROFESSIONAL = "VERIFIED_PROFESSIONAL", "Verified professional"


class UserManager(BaseUserManager):
    """Custom manager for User model."""

    def create_user(
        self,
        email: str,
        **extra_fields,
    ) -> "User":
        """Create and return a regular user."""
        if not email:
            raise ValueError("Email is required")

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        # No password login - identity is supplied by the caller for now
        user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(
        self,
        email: str,
        password: str | None = None,
        **extra_fields,
    ) -> "User":
        """Create and return a superuser (for Django admin access)."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Role.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        user = self.create_user(email, **extra_fields)
        if password:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user


class User(AbstractBaseUser, PermissionsMixin, TimestampedModel):
    """
    TradeFlow user. This is AUTH_USER_MODEL.

    Owns posts and the audit entries recorded for them.
    """

    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True, default="")
    role = models.CharField(
        max_length=32,
        choices=Role.choices,
        default=Role.MEMBER,
    )

    # Django auth compatibility
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=False,
        help_text="Can access Django admin",
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []  # Email is already required via USERNAME_FIELD

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email


class ProfessionalProfile(IdentifiedModel):
    """
    Service-provider details for a user (logistics, inspection, etc.).

    One profile per user. Verification is recorded, not performed here.
    """

    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        related_name="professional_profile",
    )
    service_type = models.CharField(
        max_length=100,
        help_text="Kind of service offered, e.g. 'haulage'",
    )
    routes = models.JSONField(
        default=list,
        blank=True,
        help_text="Routes or regions served",
    )
    capacity = models.CharField(max_length=255, blank=True, null=True)

    # Verification
    verified = models.BooleanField(default=False)
    verified_by = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Who verified this profile",
    )
    verified_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.service_type} - {self.user.email}"
