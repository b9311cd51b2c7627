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

__all__ = [
    "BaseApi",
    "BrowseApi",
    "FeedApi",
    "MarketingApi",
    "OfferApi",
    "OrderApi",
    "CatalogApi",
    "IdentityApi",
    "TaxonomyApi",
    "TranslationApi",
    "AccountApi",
    "AnalyticsApi",
    "ComplianceApi",
    "FinancesApi",
    "FulfillmentApi",
    "InventoryApi",
    "MetadataApi",
    "NegotiationApi",
    "RecommendationApi",
]
