# hermes_sdk/client.py
import logging
import threading
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

import httpx

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.apis.buy import BrowseApi, FeedApi, MarketingApi, OfferApi, OrderApi
from hermes_sdk.apis.commerce import CatalogApi, IdentityApi, TaxonomyApi, TranslationApi
from hermes_sdk.apis.sell import (
    AccountApi,
    AnalyticsApi,
    ComplianceApi,
    FinancesApi,
    FulfillmentApi,
    InventoryApi,
    MetadataApi,
    NegotiationApi,
    RecommendationApi,
)
from hermes_sdk.core.config import CredentialStore, EbayConfig
from hermes_sdk.schemas.browse import Item, SearchPagedCollection
from hermes_sdk.schemas.taxonomy import CategoryTree
from hermes_sdk.services.ebay_auth import EbayTokenManager
from hermes_sdk.services.ebay_client import RequestExecutor

logger = logging.getLogger("hermes_sdk.client")

ApiT = TypeVar("ApiT", bound=BaseApi)


class EbayClient:
    """
    Single entry point to the eBay REST APIs.

    Credentials are checked here, so a misconfigured client fails on construction
    (ConfigError) instead of on its first call. Every API family is built on first
    access and shares the same token manager, executor and HTTP connection pool.

        async with EbayClient(EbayConfig.from_settings()) as ebay:
            results = await ebay.browse.search_items("iphone", limit=5)
    """

    def __init__(
        self,
        config: EbayConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
        **token_manager_kwargs,
    ):
        self.config = config
        self.credentials = CredentialStore(config)

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout))

        self.token_manager = EbayTokenManager.from_config(
            self.credentials,
            self._http,
            config,
            **token_manager_kwargs,
        )
        executor_kwargs = {"sleep": sleep} if sleep is not None else {}
        self.executor = RequestExecutor(config, self.token_manager, self._http, **executor_kwargs)

        self._apis: Dict[str, BaseApi] = {}
        self._apis_lock = threading.Lock()

        logger.info(
            "eBay client ready (%s, marketplace %s)",
            config.environment.value,
            config.marketplace_id,
        )

    def _api(self, name: str, cls: Type[ApiT]) -> ApiT:
        api = self._apis.get(name)
        if api is not None:
            return api
        with self._apis_lock:
            api = self._apis.get(name)
            if api is None:
                api = cls(self.executor)
                self._apis[name] = api
            return api

    # --- Buy ---
    @property
    def browse(self) -> BrowseApi:
        return self._api("browse", BrowseApi)

    @property
    def feed(self) -> FeedApi:
        return self._api("feed", FeedApi)

    @property
    def marketing(self) -> MarketingApi:
        return self._api("marketing", MarketingApi)

    @property
    def offer(self) -> OfferApi:
        return self._api("offer", OfferApi)

    @property
    def order(self) -> OrderApi:
        return self._api("order", OrderApi)

    # --- Commerce ---
    @property
    def catalog(self) -> CatalogApi:
        return self._api("catalog", CatalogApi)

    @property
    def identity(self) -> IdentityApi:
        return self._api("identity", IdentityApi)

    @property
    def taxonomy(self) -> TaxonomyApi:
        return self._api("taxonomy", TaxonomyApi)

    @property
    def translation(self) -> TranslationApi:
        return self._api("translation", TranslationApi)

    # --- Sell ---
    @property
    def account(self) -> AccountApi:
        return self._api("account", AccountApi)

    @property
    def analytics(self) -> AnalyticsApi:
        return self._api("analytics", AnalyticsApi)

    @property
    def compliance(self) -> ComplianceApi:
        return self._api("compliance", ComplianceApi)

    @property
    def finances(self) -> FinancesApi:
        return self._api("finances", FinancesApi)

    @property
    def fulfillment(self) -> FulfillmentApi:
        return self._api("fulfillment", FulfillmentApi)

    @property
    def inventory(self) -> InventoryApi:
        return self._api("inventory", InventoryApi)

    @property
    def metadata(self) -> MetadataApi:
        return self._api("metadata", MetadataApi)

    @property
    def negotiation(self) -> NegotiationApi:
        return self._api("negotiation", NegotiationApi)

    @property
    def recommendation(self) -> RecommendationApi:
        return self._api("recommendation", RecommendationApi)

    # --- shortcuts ---
    async def search_items(self, query: str, limit: Optional[int] = None) -> SearchPagedCollection:
        return await self.browse.search_items(query, limit=limit)

    async def get_item(self, item_id: str) -> Item:
        return await self.browse.get_item(item_id)

    async def get_categories(self, marketplace_id: Optional[str] = None) -> CategoryTree:
        """Full category tree of the marketplace (the configured one by default)."""
        tree = await self.taxonomy.get_default_category_tree_id(marketplace_id or self.config.marketplace_id)
        return await self.taxonomy.get_category_tree(tree.category_tree_id)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "EbayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
