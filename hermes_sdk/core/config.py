# hermes_sdk/core/config.py
import base64
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hermes_sdk.core.constants import (
    DEFAULT_BACKOFF_BASE,
    DEFAULT_BACKOFF_MAX,
    DEFAULT_MARKETPLACE_ID,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_STATUSES,
    DEFAULT_TIMEOUT,
    DEFAULT_TOKEN_SAFETY_MARGIN,
    EBAY_API_BASE_PRODUCTION,
    EBAY_API_BASE_SANDBOX,
    EBAY_APIX_BASE_PRODUCTION,
    EBAY_APIX_BASE_SANDBOX,
    EBAY_APIZ_BASE_PRODUCTION,
    EBAY_APIZ_BASE_SANDBOX,
    EBAY_SCOPES,
    EBAY_TOKEN_PATH,
)
from hermes_sdk.core.errors import ConfigError, MissingCredentialError


def _raise_config_error(cls, data, handler):
    try:
        return handler(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {cls.__name__}: {e}") from e


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def api_base_url(self) -> str:
        return EBAY_API_BASE_SANDBOX if self is Environment.SANDBOX else EBAY_API_BASE_PRODUCTION

    @property
    def apiz_base_url(self) -> str:
        return EBAY_APIZ_BASE_SANDBOX if self is Environment.SANDBOX else EBAY_APIZ_BASE_PRODUCTION

    @property
    def apix_base_url(self) -> str:
        return EBAY_APIX_BASE_SANDBOX if self is Environment.SANDBOX else EBAY_APIX_BASE_PRODUCTION

    def host_url(self, host: str) -> str:
        if host == "apiz":
            return self.apiz_base_url
        if host == "apix":
            return self.apix_base_url
        return self.api_base_url

    @property
    def token_url(self) -> str:
        return self.api_base_url + EBAY_TOKEN_PATH


class RetryPolicy(BaseModel):
    """Retry bound and backoff schedule shared by every API family."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    backoff_base: float = Field(default=DEFAULT_BACKOFF_BASE, ge=0)
    backoff_max: float = Field(default=DEFAULT_BACKOFF_MAX, ge=0)
    retry_statuses: Tuple[int, ...] = DEFAULT_RETRY_STATUSES

    @model_validator(mode="wrap")
    @classmethod
    def _as_config_error(cls, data, handler):
        return _raise_config_error(cls, data, handler)

    def backoff(self, retry_number: int) -> float:
        """Delay before the n-th retry (1-based): base, 2*base, 4*base, ... capped at backoff_max."""
        return min(self.backoff_base * (2 ** (retry_number - 1)), self.backoff_max)


class EbayConfig(BaseModel):
    """
    Explicit client configuration.
    Use EbayConfig.from_settings() to build one from environment variables.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Environment.SANDBOX
    app_id: str = ""
    cert_id: str = ""
    dev_id: Optional[str] = None
    # pre-issued user access token; when set no client-credentials exchange happens
    oauth_token: Optional[str] = None
    scopes: Tuple[str, ...] = tuple(EBAY_SCOPES)
    marketplace_id: str = DEFAULT_MARKETPLACE_ID
    content_language: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    token_safety_margin: float = Field(default=DEFAULT_TOKEN_SAFETY_MARGIN, ge=0)
    retry: RetryPolicy = Field(default_factory=RetryPolicy)

    @model_validator(mode="wrap")
    @classmethod
    def _as_config_error(cls, data, handler):
        return _raise_config_error(cls, data, handler)

    @property
    def sandbox(self) -> bool:
        return self.environment is Environment.SANDBOX

    @property
    def base_url(self) -> str:
        return self.environment.api_base_url

    def with_app_id(self, app_id: str) -> "EbayConfig":
        return self.model_copy(update={"app_id": app_id})

    def with_cert_id(self, cert_id: str) -> "EbayConfig":
        return self.model_copy(update={"cert_id": cert_id})

    def with_dev_id(self, dev_id: str) -> "EbayConfig":
        return self.model_copy(update={"dev_id": dev_id})

    def with_sandbox(self, sandbox: bool) -> "EbayConfig":
        env = Environment.SANDBOX if sandbox else Environment.PRODUCTION
        return self.model_copy(update={"environment": env})

    def with_oauth_token(self, token: str) -> "EbayConfig":
        return self.model_copy(update={"oauth_token": token})

    @classmethod
    def from_settings(cls, settings: Optional["EbaySettings"] = None) -> "EbayConfig":
        settings = settings or get_settings()
        if settings.ebay_sandbox:
            env = Environment.SANDBOX
            app_id, cert_id, dev_id = (
                settings.ebay_app_id_sandbox,
                settings.ebay_cert_id_sandbox,
                settings.ebay_dev_id_sandbox,
            )
        else:
            env = Environment.PRODUCTION
            app_id, cert_id, dev_id = (
                settings.ebay_app_id_production,
                settings.ebay_cert_id_production,
                settings.ebay_dev_id_production,
            )

        return cls(
            environment=env,
            app_id=app_id or "",
            cert_id=cert_id or "",
            dev_id=dev_id,
            oauth_token=settings.ebay_oauth_token,
            marketplace_id=settings.ebay_marketplace_id,
            content_language=settings.ebay_content_language,
            timeout=settings.ebay_timeout,
        )


class EbaySettings(BaseSettings):
    ebay_sandbox: bool = True

    ebay_app_id_sandbox: Optional[str] = None
    ebay_cert_id_sandbox: Optional[str] = None
    ebay_dev_id_sandbox: Optional[str] = None

    ebay_app_id_production: Optional[str] = None
    ebay_cert_id_production: Optional[str] = None
    ebay_dev_id_production: Optional[str] = None

    ebay_oauth_token: Optional[str] = None
    ebay_marketplace_id: str = DEFAULT_MARKETPLACE_ID
    ebay_content_language: Optional[str] = None
    ebay_timeout: float = DEFAULT_TIMEOUT

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="wrap")
    @classmethod
    def _as_config_error(cls, data, handler):
        # bad EBAY_* values surface as ConfigError like any other config problem
        return _raise_config_error(cls, data, handler)


@lru_cache
def get_settings() -> EbaySettings:
    return EbaySettings()


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_id: str
    cert_id: str
    dev_id: Optional[str] = None


class CredentialStore:
    """
    Read-only holder of the keyset for one environment.
    Missing app_id / cert_id fail here, never on the first API call.
    """

    REQUIRED_FIELDS = ("app_id", "cert_id")

    def __init__(self, config: EbayConfig):
        for field in self.REQUIRED_FIELDS:
            value = getattr(config, field)
            if not value or not value.strip():
                raise MissingCredentialError(field, config.environment.value)

        self._environment = config.environment
        self._credentials = Credentials(
            app_id=config.app_id.strip(),
            cert_id=config.cert_id.strip(),
            dev_id=config.dev_id,
        )

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def app_id(self) -> str:
        return self._credentials.app_id

    @property
    def cert_id(self) -> str:
        return self._credentials.cert_id

    @property
    def dev_id(self) -> Optional[str]:
        return self._credentials.dev_id

    def basic_auth_header(self) -> str:
        raw = f"{self.app_id}:{self.cert_id}"
        basic = base64.b64encode(raw.encode("utf-8")).decode("utf-8")
        return f"Basic {basic}"

    def __repr__(self) -> str:
        return f"CredentialStore(environment={self._environment.value!r}, app_id={self.app_id[:8]!r}...)"
