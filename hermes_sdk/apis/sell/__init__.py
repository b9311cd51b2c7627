from hermes_sdk.apis.sell.account import AccountApi
from hermes_sdk.apis.sell.analytics import AnalyticsApi
from hermes_sdk.apis.sell.compliance import ComplianceApi
from hermes_sdk.apis.sell.finances import FinancesApi
from hermes_sdk.apis.sell.fulfillment import FulfillmentApi
from hermes_sdk.apis.sell.inventory import InventoryApi
from hermes_sdk.apis.sell.metadata import MetadataApi
from hermes_sdk.apis.sell.negotiation import NegotiationApi
from hermes_sdk.apis.sell.recommendation import RecommendationApi

__all__ = [
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
