"""Shared fixtures: a scripted fake eBay behind httpx.MockTransport, a fake clock and a recording sleep."""
import asyncio
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

import httpx
import pytest
import pytest_asyncio

from hermes_sdk.core.config import CredentialStore, EbayConfig
from hermes_sdk.core.constants import EBAY_TOKEN_PATH
from hermes_sdk.services.ebay_auth import EbayTokenManager
from hermes_sdk.services.ebay_client import RequestExecutor


class FakeClock:
    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeEbay:
    """
    Token endpoint issues "t1", "t2", ... (or token_values in order);
    every other request pops the next scripted response (200 {} once the script runs out).
    """

    def __init__(self):
        self.token_calls = 0
        self.token_requests: List[httpx.Request] = []
        self.token_values: List[str] = []
        self.token_status = 200
        self.token_body: Optional[dict] = None
        self.token_content: Optional[bytes] = None
        self.token_error: Optional[Exception] = None
        self.expires_in = 7200
        self.token_delay = 0.0
        self.requests: List[httpx.Request] = []
        self.responses: List[Union[httpx.Response, Exception]] = []

    def queue(self, *responses: Union[httpx.Response, Exception]) -> None:
        self.responses.extend(responses)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == EBAY_TOKEN_PATH:
            return await self._token(request)

        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json={})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def _token(self, request: httpx.Request) -> httpx.Response:
        self.token_calls += 1
        self.token_requests.append(request)
        if self.token_delay:
            await asyncio.sleep(self.token_delay)
        if self.token_error is not None:
            raise self.token_error
        if self.token_status != 200:
            return httpx.Response(self.token_status, json={"error": "invalid_client"})
        if self.token_content is not None:
            return httpx.Response(200, content=self.token_content)
        if self.token_body is not None:
            return httpx.Response(200, json=self.token_body)

        if self.token_values:
            value = self.token_values.pop(0)
        else:
            value = f"t{self.token_calls}"
        return httpx.Response(
            200,
            json={
                "access_token": value,
                "expires_in": self.expires_in,
                "token_type": "Application Access Token",
            },
        )


@pytest.fixture
def fake_ebay():
    return FakeEbay()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def config():
    return EbayConfig(app_id="test-app-id", cert_id="test-cert-id")


@pytest_asyncio.fixture
async def http_client(fake_ebay):
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_ebay.handler))
    yield client
    await client.aclose()


@pytest.fixture
def token_manager(config, http_client, clock):
    return EbayTokenManager.from_config(CredentialStore(config), http_client, config, clock=clock)


@pytest.fixture
def executor(config, token_manager, http_client, sleep):
    return RequestExecutor(config, token_manager, http_client, sleep=sleep)
