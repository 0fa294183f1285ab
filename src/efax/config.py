"""
eFax client configuration.

Single source of truth for credentials and endpoint settings:
- EFaxConfig (Pydantic Settings) loads from OS env (EFAX_*) + .env
- clients receive an explicit config object, never module-level globals
"""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from efax.errors import ConfigurationError

DEFAULT_SERVICE_URL = "https://secure.efaxdeveloper.com/EFax_WebFax.serv"


class TransportType(str, Enum):
    """Supported transport implementations."""

    HTTPX = "httpx"
    MOCK = "mock"


@dataclass(frozen=True)
class Credentials:
    """Account credentials sent with every request."""

    username: str
    password: str
    account_id: str

    def __repr__(self) -> str:
        return (
            f"Credentials(username={self.username!r}, password='***', "
            f"account_id={self.account_id!r})"
        )


class EFaxConfig(BaseSettings):
    """eFax client configuration from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EFAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Account credentials
    username: str = Field(default="")
    password: str = Field(default="")
    account_id: str = Field(default="")

    service_url: str = Field(
        default=DEFAULT_SERVICE_URL,
        description="Outbound endpoint of the eFax Developer service.",
    )
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)

    transport_type: TransportType = Field(default=TransportType.HTTPX)
    log_level: str = Field(default="INFO")

    @field_validator("service_url")
    @classmethod
    def validate_service_url(cls, v: str) -> str:
        """The service only accepts TLS connections."""
        parsed = urlparse(v)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError(f"service_url must be an https URL, got {v!r}")
        return v

    def credentials(self) -> Credentials:
        """Return the account credentials, failing if any of them is empty."""
        missing = [
            name
            for name in ("username", "password", "account_id")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing eFax credentials: {', '.join(missing)}",
                error_code="MISSING_CREDENTIALS",
                details={"missing": missing},
            )
        return Credentials(
            username=self.username,
            password=self.password,
            account_id=self.account_id,
        )


def get_efax_config() -> EFaxConfig:
    return EFaxConfig()
