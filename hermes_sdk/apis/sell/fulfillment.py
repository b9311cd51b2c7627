from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class FulfillmentApi(BaseApi):
    """Sell Fulfillment API: orders, refunds and shipping fulfillments."""

    base_path = "/sell/fulfillment/v1"

    async def get_orders(
        self,
        field_groups: Optional[str] = None,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order_ids: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "fieldGroups": field_groups,
            "filter": filter,
            "limit": limit,
            "offset": offset,
            "orderIds": order_ids,
        }
        return await self._call("GET", self._path("order"), params=params)

    async def get_order(self, order_id: str, field_groups: Optional[str] = None) -> Dict[str, Any]:
        return await self._call("GET", self._path("order", order_id), params={"fieldGroups": field_groups})

    async def issue_refund(self, order_id: str, refund_request: Any) -> Optional[Dict[str, Any]]:
        return await self._call("POST", self._path("order", order_id, "issue_refund"), json=refund_request)

    async def create_shipping_fulfillment(self, order_id: str, fulfillment_details: Any) -> Optional[Dict[str, Any]]:
        return await self._call(
            "POST",
            self._path("order", order_id, "shipping_fulfillment"),
            json=fulfillment_details,
        )

    async def get_shipping_fulfillments(self, order_id: str) -> Dict[str, Any]:
        return await self._call("GET", self._path("order", order_id, "shipping_fulfillment"))

    async def get_shipping_fulfillment(self, fulfillment_id: str, order_id: str) -> Dict[str, Any]:
        return await self._call("GET", self._path("order", order_id, "shipping_fulfillment", fulfillment_id))
