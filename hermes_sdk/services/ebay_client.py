# hermes_sdk/services/ebay_client.py
import asyncio
import logging
import time
from functools import lru_cache
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from hermes_sdk.core.config import EbayConfig
from hermes_sdk.core.constants import HEADER_CONTENT_LANGUAGE, HEADER_MARKETPLACE_ID
from hermes_sdk.core.errors import ApiError, DecodeError, TransportError
from hermes_sdk.schemas.request import RequestDescriptor
from hermes_sdk.schemas.token import AccessToken
from hermes_sdk.services.ebay_auth import EbayTokenManager

logger = logging.getLogger("hermes_sdk.http")


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class RequestExecutor:
    """
    Runs one authenticated eBay REST call end to end.
    - bearer token from the token manager (AuthError propagates untouched)
    - transport failures and 429/503 retried with exponential backoff, reads (or retry_safe) only
    - a 401 invalidates the rejected token and the call is replayed exactly once
    - other non-2xx -> ApiError subclass, 2xx body -> response_model (DecodeError on mismatch)
    """

    def __init__(
        self,
        config: EbayConfig,
        token_manager: EbayTokenManager,
        http_client: httpx.AsyncClient,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.config = config
        self.retry = config.retry
        self.token_manager = token_manager
        self._http = http_client
        self._timeout = httpx.Timeout(config.timeout)
        self._sleep = sleep

    def _build_headers(self, request: RequestDescriptor, token: AccessToken) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            HEADER_MARKETPLACE_ID: self.config.marketplace_id,
        }
        if self.config.content_language:
            headers[HEADER_CONTENT_LANGUAGE] = self.config.content_language
        if request.body is not None and request.content is None:
            headers["Content-Type"] = "application/json"
        headers.update(request.headers)
        headers["Authorization"] = f"Bearer {token.value}"
        return headers

    async def _send(self, request: RequestDescriptor, token: AccessToken) -> httpx.Response:
        kwargs: Dict[str, Any] = {
            "headers": self._build_headers(request, token),
            "timeout": self._timeout,
        }
        if request.params:
            kwargs["params"] = request.params
        if request.content is not None:
            kwargs["content"] = request.content
        elif request.body is not None:
            kwargs["json"] = request.body

        url = self.config.environment.host_url(request.host) + request.path
        return await self._http.request(request.method, url, **kwargs)

    def _status_delay(self, resp: httpx.Response, retry_number: int) -> float:
        delay = self.retry.backoff(retry_number)
        retry_after = resp.headers.get("Retry-After", "")
        if retry_after.isdigit():
            delay = min(max(delay, float(retry_after)), self.retry.backoff_max)
        return delay

    async def execute(self, request: RequestDescriptor, response_model: Any = None) -> Any:
        retry_safe = request.is_retry_safe
        retries = 0
        sends = 0
        auth_replayed = False
        started = time.monotonic()

        while True:
            token = await self.token_manager.get_token()

            sends += 1
            try:
                resp = await self._send(request, token)
            except httpx.RequestError as e:
                if isinstance(e, httpx.TransportError) and retry_safe and retries < self.retry.max_retries:
                    retries += 1
                    delay = self.retry.backoff(retries)
                    logger.warning(
                        "eBay %s %s transport error (%s), retry %s/%s in %.2fs",
                        request.method, request.path, e, retries, self.retry.max_retries, delay,
                    )
                    await self._sleep(delay)
                    continue
                raise TransportError(
                    f"eBay {request.method} {request.path} failed: {e!r}",
                    attempts=sends,
                ) from e

            if resp.status_code == 401 and not auth_replayed:
                auth_replayed = True
                logger.warning("eBay rejected the access token for %s %s, refreshing once", request.method, request.path)
                self.token_manager.invalidate(token)
                continue

            if (
                resp.status_code in self.retry.retry_statuses
                and retry_safe
                and retries < self.retry.max_retries
            ):
                retries += 1
                delay = self._status_delay(resp, retries)
                logger.warning(
                    "eBay %s %s returned %s, retry %s/%s in %.2fs",
                    request.method, request.path, resp.status_code, retries, self.retry.max_retries, delay,
                )
                await self._sleep(delay)
                continue

            logger.debug(
                "eBay %s %s -> %s in %.3fs",
                request.method, request.path, resp.status_code, time.monotonic() - started,
            )
            if resp.is_error:
                raise ApiError.from_response(resp)
            return self._decode(resp, response_model)

    def _decode(self, resp: httpx.Response, response_model: Any) -> Any:
        if response_model is bytes:
            return resp.content

        if not resp.content:
            if response_model is None:
                return None
            raise DecodeError("Empty response body", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}", status_code=resp.status_code, body=resp.text) from e

        if response_model is None:
            return data

        try:
            return _adapter(response_model).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match {getattr(response_model, '__name__', response_model)}: {e}",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, Any]] = None,
        json: Any = None,
        content: Optional[bytes] = None,
        host: str = "api",
        retry_safe: Optional[bool] = None,
        response_model: Any = None,
    ) -> Any:
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            params=params,
            headers=headers,
            body=json,
            content=content,
            host=host,
            retry_safe=retry_safe,
        )
        return await self.execute(descriptor, response_model)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        return await self.request("GET", path, params=params, **kwargs)

    async def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("PUT", path, json=json, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)
