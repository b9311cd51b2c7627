from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class NegotiationApi(BaseApi):
    """Sell Negotiation API: offers to buyers watching a listing."""

    base_path = "/sell/negotiation/v1"

    async def find_eligible_items(
        self,
        marketplace_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("find_eligible_items"),
            params={"limit": limit, "offset": offset},
            headers=self._marketplace_headers(marketplace_id),
        )

    async def send_offer_to_interested_buyers(self, marketplace_id: str, create_offers_request: Any) -> Optional[Dict[str, Any]]:
        return await self._call(
            "POST",
            self._path("send_offer_to_interested_buyers"),
            json=create_offers_request,
            headers=self._marketplace_headers(marketplace_id),
        )
