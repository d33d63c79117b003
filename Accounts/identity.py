"""Identity resolution: who is the caller and are they an admin."""

import logging
from dataclasses import dataclass, field

from django.conf import settings

from .models import AdminAllowlist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminConfig:
    """Admin e-mails granted privilege regardless of the stored allowlist."""

    emails: tuple = field(default_factory=tuple)

    @classmethod
    def from_settings(cls):
        emails = settings.TURF_BOOKING.get("ADMIN_EMAILS", [])
        return cls(emails=tuple(e.strip().lower() for e in emails if e.strip()))


class IdentityProvider:
    """Resolves admin privilege from configuration plus the allowlist record."""

    def __init__(self, config: AdminConfig, allowlist_loader=AdminAllowlist.load):
        self.config = config
        self._load_allowlist = allowlist_loader

    def admin_emails(self):
        stored = self._load_allowlist().emails
        return set(self.config.emails) | {e.lower() for e in stored}

    def is_admin_email(self, email):
        if not email:
            return False
        return email.lower() in self.admin_emails()

    def is_admin(self, user):
        if user is None or not user.is_authenticated:
            return False
        return self.is_admin_email(user.email)


def get_identity_provider():
    return IdentityProvider(AdminConfig.from_settings())
