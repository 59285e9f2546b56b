"""
Member model: the people of an ensemble, and the login identity.
Email is unique per organization (case-insensitive), not globally.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.db.models.functions import Lower
from django.utils import timezone


def normalize_member_email(email):
    """Trimmed, lower-cased email used for lookups and storage."""
    return (email or '').strip().lower()


class MemberManager(BaseUserManager):
    """Manager where email (within an organization) is the identifier"""

    def create_user(self, email, password=None, **extra_fields):
        """Create and save a member. Without a password the account cannot log in."""
        email = normalize_member_email(email)
        if not email:
            raise ValueError('The Email field must be set')
        member = self.model(email=email, **extra_fields)
        if password:
            member.set_password(password)
        else:
            member.set_unusable_password()
        member.save(using=self._db)
        return member

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', Member.ROLE_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)

    def for_organization(self, organization_id):
        return self.filter(organization_id=organization_id)


class Member(AbstractBaseUser, PermissionsMixin):
    """
    Ensemble member. role=Admin is staff for the API (schedule management, review).
    """
    ROLE_ADMIN = 'Admin'
    ROLE_MEMBER = 'Member'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_MEMBER, 'Member'),
    ]

    organization = models.ForeignKey(
        'core.Organization',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='members',
        db_column='organization_id',
    )
    email = models.EmailField(max_length=200, db_index=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_MEMBER, db_index=True)

    is_active = models.BooleanField(default=True)
    notifications_enabled = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False, help_text='Django admin site access')
    date_joined = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MemberManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        db_table = 'members'
        verbose_name = 'Member'
        verbose_name_plural = 'Members'
        ordering = ['last_name', 'first_name']
        constraints = [
            models.UniqueConstraint(
                Lower('email'),
                'organization',
                name='unique_member_email_per_organization',
            ),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.email})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN
