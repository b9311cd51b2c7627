"""Async client for the eBay REST APIs."""
from hermes_sdk.client import EbayClient
from hermes_sdk.core.config import CredentialStore, EbayConfig, EbaySettings, Environment, RetryPolicy
from hermes_sdk.core.errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ConfigError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    HermesError,
    MissingCredentialError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from hermes_sdk.schemas.request import RequestDescriptor
from hermes_sdk.schemas.token import AccessToken
from hermes_sdk.services.ebay_auth import EbayTokenManager, TokenCache
from hermes_sdk.services.ebay_client import RequestExecutor

__version__ = "0.1.0"

__all__ = [
    "EbayClient",
    "EbayConfig",
    "EbaySettings",
    "Environment",
    "RetryPolicy",
    "CredentialStore",
    "EbayTokenManager",
    "TokenCache",
    "RequestExecutor",
    "RequestDescriptor",
    "AccessToken",
    "HermesError",
    "ConfigError",
    "MissingCredentialError",
    "AuthError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
]
