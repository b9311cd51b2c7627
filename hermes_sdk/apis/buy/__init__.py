from hermes_sdk.apis.buy.browse import BrowseApi
from hermes_sdk.apis.buy.feed import FeedApi
from hermes_sdk.apis.buy.marketing import MarketingApi
from hermes_sdk.apis.buy.offer import OfferApi
from hermes_sdk.apis.buy.order import OrderApi

__all__ = ["BrowseApi", "FeedApi", "MarketingApi", "OfferApi", "OrderApi"]
