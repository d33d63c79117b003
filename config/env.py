"""Environment-driven configuration for the turf booking service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(BaseSettings):
    """Runtime settings loaded from environment (prefix TURF_)."""

    secret_key: str = "django-insecure-change-me"
    debug: bool = True
    allowed_hosts: str = "*"
    database_path: str = "db.sqlite3"
    log_level: str = "INFO"

    # Comma separated; merged with the stored admin allowlist
    admin_emails: str = ""
    business_whatsapp_number: str = Field(default="919999999999")
    currency_symbol: str = "₹"

    model_config = SettingsConfigDict(env_prefix="TURF_", env_file=".env", extra="ignore")

    def admin_email_list(self):
        return [
            email.strip().lower()
            for email in self.admin_emails.split(",")
            if email.strip()
        ]

    def allowed_host_list(self):
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


env = Environment()
