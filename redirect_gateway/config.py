"""
Gateway Configuration Module

Loads gateway credentials and connection settings from the environment and
exposes them as an immutable Configuration value passed into the gateway.
"""
import logging
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


API_VERSION = "2"


class Settings(BaseSettings):
    """
    Gateway settings loaded from environment variables.

    Every field can be set with a GATEWAY_ prefixed variable
    (GATEWAY_MERCHANT_ID, GATEWAY_PRIVATE_KEY, ...) or from a .env file.
    """

    gateway_url: str = "http://localhost:3000"
    merchant_id: str = ""
    public_key: str = ""
    private_key: str = ""
    api_version: str = API_VERSION

    # Seconds, passed straight through to the HTTP transport
    timeout: float = 60.0

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Credentials(BaseModel):
    """Merchant credentials. Read-only for the lifetime of a gateway."""
    merchant_id: str
    public_key: str
    private_key: str

    model_config = {"frozen": True}

    def __repr__(self) -> str:
        return f"Credentials(merchant_id={self.merchant_id!r}, public_key={self.public_key!r})"


class Configuration(BaseModel):
    """
    Immutable gateway configuration.

    Carries the credentials and the gateway base URL. Built once at client
    setup and handed to every component that needs it; nothing in the SDK
    mutates it afterwards.
    """
    gateway_url: str
    credentials: Credentials
    api_version: str = API_VERSION
    timeout: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "Configuration":
        return cls(
            gateway_url=settings.gateway_url,
            credentials=Credentials(
                merchant_id=settings.merchant_id,
                public_key=settings.public_key,
                private_key=settings.private_key,
            ),
            api_version=settings.api_version,
            timeout=settings.timeout,
        )

    @property
    def merchant_id(self) -> str:
        return self.credentials.merchant_id

    @property
    def public_key(self) -> str:
        return self.credentials.public_key

    @property
    def private_key(self) -> str:
        return self.credentials.private_key

    def base_merchant_url(self) -> str:
        """
        Root URL for every merchant-scoped gateway path.

        Raises:
            ConfigurationError: If no merchant id is configured
        """
        if not self.merchant_id:
            raise ConfigurationError("merchant_id is not configured")
        return f"{self.gateway_url.rstrip('/')}/merchants/{self.merchant_id}"

    def require_keys(self) -> None:
        """Raise ConfigurationError unless both API keys are present."""
        missing = [
            name for name, value in (
                ("public_key", self.public_key),
                ("private_key", self.private_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing gateway credentials: {', '.join(missing)}",
                details={"missing": missing},
            )


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
