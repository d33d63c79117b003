# accounts/models.py

from django.db import models
from django.contrib.auth.models import (
    AbstractBaseUser,
    PermissionsMixin,
    BaseUserManager,
)

# ----------------------------------
# CUSTOM USER MANAGER
# ----------------------------------
# Email-based user creation for customers and staff.
class UserManager(BaseUserManager):

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email, password, **extra_fields)


# ----------------------------------
# CUSTOM USER MODEL
# ----------------------------------
# Admin privilege is not a column here: it is resolved from the
# admin allowlist by Accounts.identity.IdentityProvider.
class User(AbstractBaseUser, PermissionsMixin):

    email = models.EmailField(unique=True)

    # Shown to the admin and used in WhatsApp messages
    full_name = models.CharField(max_length=255, blank=True)

    # Prefills the WhatsApp number on booking requests
    phone_number = models.CharField(max_length=20, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    objects = UserManager()

    created_at = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = "email"

    @property
    def display_name(self):
        return self.full_name or self.email

    def __str__(self):
        return self.email


# ----------------------------------
# ADMIN ALLOWLIST (SINGLETON)
# ----------------------------------
class AdminAllowlist(models.Model):
    """
    Single row holding the e-mails granted admin privilege.
    """
    SINGLETON_ID = 1

    emails = models.JSONField(default=list)
    updated_at = models.DateTimeField(auto_now=True)

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_ID
        self.emails = sorted({e.strip().lower() for e in self.emails if e.strip()})
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """
        Read the allowlist without writing; an unsaved empty record
        stands in when none is stored yet.
        """
        return cls.objects.filter(pk=cls.SINGLETON_ID).first() or cls(emails=[])

    @classmethod
    def load_for_update(cls):
        obj, _ = cls.objects.select_for_update().get_or_create(pk=cls.SINGLETON_ID)
        return obj

    def __str__(self):
        return ", ".join(self.emails) or "No admins"
