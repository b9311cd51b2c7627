import logging
from typing import Any, Dict

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.core.errors import ApiError
from hermes_sdk.schemas.offer import Bidding

logger = logging.getLogger("hermes_sdk.offer")


class OfferApi(BaseApi):
    """Buy Offer API: auction bidding."""

    base_path = "/buy/offer/v1_beta"

    async def get_bidding(self, item_id: str, marketplace_id: str) -> Bidding:
        return await self._call(
            "GET",
            self._path("bidding", item_id),
            headers=self._marketplace_headers(marketplace_id),
            response_model=Bidding,
        )

    async def place_proxy_bid(self, item_id: str, marketplace_id: str, bid_request: Any) -> Dict[str, Any]:
        """bid_request: {"maxAmount": {"currency": "USD", "value": "12.00"}, "userConsent": {...}}"""
        return await self._call(
            "POST",
            self._path("bidding", item_id, "place_proxy_bid"),
            json=bid_request,
            headers=self._marketplace_headers(marketplace_id),
        )

    async def can_bid_on_item(self, item_id: str, marketplace_id: str) -> bool:
        try:
            bidding = await self.get_bidding(item_id, marketplace_id)
        except ApiError as e:
            # no bidding info (not an auction, or not visible to us)
            logger.info("offer: no bidding info for item %s: %s", item_id, e)
            return False
        return bidding.auction_status is not None and bidding.auction_status != "ENDED"
