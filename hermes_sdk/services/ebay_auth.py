# hermes_sdk/services/ebay_auth.py
import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

import httpx

from hermes_sdk.core.config import CredentialStore, EbayConfig
from hermes_sdk.core.constants import DEFAULT_TIMEOUT, DEFAULT_TOKEN_SAFETY_MARGIN, EBAY_SCOPES
from hermes_sdk.core.errors import AuthError
from hermes_sdk.schemas.token import AccessToken, TokenResponse

logger = logging.getLogger("hermes_sdk.auth")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCache:
    """
    Holds zero or one AccessToken and the lock that serializes refreshes.
    Also remembers how the latest refresh attempt ended, so callers that queued
    behind a failed attempt share its error instead of each retrying it.
    """

    def __init__(self):
        self._token: Optional[AccessToken] = None
        # created on first use so it binds to the loop that actually runs the client
        self._lock: Optional[asyncio.Lock] = None
        self._attempts = 0
        self._last_error: Optional[AuthError] = None

    @property
    def token(self) -> Optional[AccessToken]:
        return self._token

    @property
    def lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def last_error(self) -> Optional[AuthError]:
        return self._last_error

    def begin_attempt(self) -> None:
        self._attempts += 1
        self._last_error = None

    def fail(self, error: AuthError) -> None:
        self._last_error = error

    def store(self, token: AccessToken) -> None:
        self._token = token

    def invalidate(self, token: Optional[AccessToken] = None) -> bool:
        """
        Drop the cached token. With `token`, only drop it if it is still the cached one,
        so several callers rejected with the same token cause a single refresh.
        """
        if self._token is None:
            return False
        if token is not None and self._token.value != token.value:
            return False
        self._token = None
        return True


class EbayTokenManager:
    """
    Application access tokens via the OAuth client credentials grant.
    - cached token still valid (expiry minus safety margin) -> returned, no network call
    - otherwise one caller refreshes under the cache lock, the rest wait and reuse its result,
      or its AuthError when that refresh failed
    - failures raise AuthError and leave the cache untouched; no retry here
    """

    def __init__(
        self,
        credentials: CredentialStore,
        http_client: httpx.AsyncClient,
        scopes: Sequence[str] = EBAY_SCOPES,
        safety_margin: float = DEFAULT_TOKEN_SAFETY_MARGIN,
        timeout: float = DEFAULT_TIMEOUT,
        static_token: Optional[str] = None,
        cache: Optional[TokenCache] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.credentials = credentials
        self.token_url = credentials.environment.token_url
        self.scopes = list(scopes)
        self.safety_margin = safety_margin
        self.cache = cache or TokenCache()
        self._http = http_client
        self._timeout = httpx.Timeout(timeout)
        self._clock = clock
        self._static_token = None
        if static_token:
            # user tokens are issued out of band; treat as never expiring on our side
            self._static_token = AccessToken(
                value=static_token,
                expires_at=datetime.max.replace(tzinfo=timezone.utc),
                token_type="User Access Token",
            )

    @classmethod
    def from_config(
        cls,
        credentials: CredentialStore,
        http_client: httpx.AsyncClient,
        config: EbayConfig,
        **kwargs,
    ) -> "EbayTokenManager":
        return cls(
            credentials,
            http_client,
            scopes=config.scopes,
            safety_margin=config.token_safety_margin,
            timeout=config.timeout,
            static_token=config.oauth_token,
            **kwargs,
        )

    def _is_fresh(self, token: Optional[AccessToken]) -> bool:
        return token is not None and token.is_fresh(self._clock(), self.safety_margin)

    async def get_token(self) -> AccessToken:
        if self._static_token is not None:
            return self._static_token

        token = self.cache.token
        if self._is_fresh(token):
            return token

        seen_attempts = self.cache.attempts
        async with self.cache.lock:
            # another caller may have refreshed while we waited
            token = self.cache.token
            if self._is_fresh(token):
                logger.debug("Reusing eBay token refreshed by a concurrent caller")
                return token

            error = self.cache.last_error
            if self.cache.attempts != seen_attempts and error is not None:
                # the refresh we queued behind failed; share its outcome
                raise AuthError(str(error), status_code=error.status_code, body=error.body) from error

            self.cache.begin_attempt()
            try:
                token = await self._request_token()
            except AuthError as e:
                self.cache.fail(e)
                raise
            self.cache.store(token)
            return token

    def invalidate(self, token: Optional[AccessToken] = None) -> bool:
        if self._static_token is not None:
            return False
        dropped = self.cache.invalidate(token)
        if dropped:
            logger.info("eBay access token invalidated")
        return dropped

    async def _request_token(self) -> AccessToken:
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": self.credentials.basic_auth_header(),
        }
        data = {
            "grant_type": "client_credentials",
            "scope": " ".join(self.scopes),
        }

        logger.info("Requesting eBay access token (%s)", self.credentials.environment.value)
        issued_at = self._clock()
        try:
            resp = await self._http.post(self.token_url, data=data, headers=headers, timeout=self._timeout)
        except httpx.HTTPError as e:
            logger.error("eBay token request failed with network error: %s", e)
            raise AuthError(f"eBay token request failed: {e}") from e

        if resp.status_code != 200:
            logger.error("eBay token request failed with HTTP %s", resp.status_code)
            raise AuthError(
                f"Failed to get eBay token: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            body = TokenResponse.model_validate(resp.json())
        except ValueError as e:
            # bad JSON, bad UTF-8 or a body TokenResponse rejects (ValidationError)
            raise AuthError(
                "No usable access_token in eBay token response",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        token = AccessToken.from_response(body, issued_at)
        logger.info(
            "eBay access token acquired, expires in %ss (at %s)",
            body.expires_in,
            token.expires_at.isoformat(),
        )
        return token

