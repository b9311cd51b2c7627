from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.core.constants import HEADER_CONTENT_LANGUAGE


class InventoryApi(BaseApi):
    """Sell Inventory API: inventory items and offers."""

    base_path = "/sell/inventory/v1"

    async def get_inventory_items(self, limit: int = 100, offset: int = 0) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("inventory_item"),
            params={"limit": limit, "offset": offset},
        )

    async def create_or_replace_inventory_item(
        self,
        sku: str,
        inventory_item: Any,
        content_language: str = "en-US",
    ) -> Optional[Dict[str, Any]]:
        return await self._call(
            "PUT",
            self._path("inventory_item", sku),
            json=inventory_item,
            headers={HEADER_CONTENT_LANGUAGE: content_language},
        )

    async def get_inventory_item(self, sku: str) -> Dict[str, Any]:
        return await self._call("GET", self._path("inventory_item", sku))

    async def delete_inventory_item(self, sku: str) -> None:
        await self._call("DELETE", self._path("inventory_item", sku))

    async def create_offer(self, offer_details: Any, content_language: str = "en-US") -> Dict[str, Any]:
        return await self._call(
            "POST",
            self._path("offer"),
            json=offer_details,
            headers={HEADER_CONTENT_LANGUAGE: content_language},
        )

    async def get_offers(
        self,
        marketplace_id: Optional[str] = None,
        sku: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {"marketplace_id": marketplace_id, "sku": sku, "limit": limit, "offset": offset}
        return await self._call("GET", self._path("offer"), params=params)

    async def publish_offer(self, offer_id: str) -> Dict[str, Any]:
        return await self._call("POST", self._path("offer", offer_id, "publish"))

    async def withdraw_offer(self, offer_id: str) -> None:
        await self._call("POST", self._path("offer", offer_id, "withdraw"))
