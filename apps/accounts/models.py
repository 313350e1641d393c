from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid


class UserRole(models.TextChoices):
    CLIENT = 'client', 'Client'
    BARMAN = 'barman', 'Barman'


class UserManager(BaseUserManager):
    """User manager for phone/OTP users; passwords exist only for staff."""

    def create_user(self, email=None, password=None, **extra_fields):
        if email:
            email = self.normalize_email(email)
        else:
            email = None

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('verified', True)

        if not email:
            raise ValueError('Email is required')
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Spontan user.

    ``tokens`` is the balance column of the token ledger. Only
    ``apps.tokens.services`` writes it, always through conditional
    ``UPDATE`` statements.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, blank=True)
    email = models.EmailField(unique=True, max_length=255, null=True, blank=True)
    phone = models.CharField(unique=True, max_length=20, null=True, blank=True)

    verified = models.BooleanField(default=False)
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.CLIENT
    )
    payment_verified = models.BooleanField(default=False)
    tokens = models.PositiveIntegerField(default=0)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['role'], name='users_role_idx'),
            models.Index(fields=['created_at'], name='users_created_at_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(tokens__gte=0),
                name='user_tokens_non_negative',
            ),
        ]

    def __str__(self):
        return self.email or self.phone or str(self.id)

    @property
    def is_barman(self):
        return self.role == UserRole.BARMAN

    def get_display_name(self):
        """Return name, falling back to phone or email."""
        return self.name or self.phone or (self.email or '').split('@')[0]


class OtpCode(models.Model):
    """One-time phone verification code; one live code per phone."""

    phone = models.CharField(max_length=20, unique=True)
    code = models.CharField(max_length=8)
    expires_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'otp_codes'

    def __str__(self):
        return f"OTP for {self.phone}"
