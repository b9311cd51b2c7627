from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class OrderApi(BaseApi):
    """Buy Order API (v2): guest checkout sessions and purchase orders."""

    base_path = "/buy/order/v2"
    host = "apix"

    async def _session_update(
        self,
        checkout_session_id: str,
        action: str,
        marketplace_id: str,
        body: Any,
        end_user_ctx: Optional[str],
    ) -> Dict[str, Any]:
        return await self._call(
            "POST",
            self._path("guest_checkout_session", checkout_session_id, action),
            json=body,
            headers=self._marketplace_headers(marketplace_id, end_user_ctx),
        )

    async def initiate_guest_checkout_session(
        self,
        marketplace_id: str,
        checkout_request: Any,
        end_user_ctx: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "POST",
            self._path("guest_checkout_session", "initiate"),
            json=checkout_request,
            headers=self._marketplace_headers(marketplace_id, end_user_ctx),
        )

    async def get_guest_checkout_session(
        self,
        checkout_session_id: str,
        marketplace_id: str,
        end_user_ctx: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("guest_checkout_session", checkout_session_id),
            headers=self._marketplace_headers(marketplace_id, end_user_ctx),
        )

    async def apply_guest_coupon(self, checkout_session_id, marketplace_id, coupon_request, end_user_ctx=None):
        return await self._session_update(checkout_session_id, "apply_coupon", marketplace_id, coupon_request, end_user_ctx)

    async def remove_guest_coupon(self, checkout_session_id, marketplace_id, coupon_request, end_user_ctx=None):
        return await self._session_update(checkout_session_id, "remove_coupon", marketplace_id, coupon_request, end_user_ctx)

    async def update_guest_quantity(self, checkout_session_id, marketplace_id, update_quantity, end_user_ctx=None):
        return await self._session_update(checkout_session_id, "update_quantity", marketplace_id, update_quantity, end_user_ctx)

    async def update_guest_shipping_address(self, checkout_session_id, marketplace_id, shipping_address, end_user_ctx=None):
        return await self._session_update(
            checkout_session_id, "update_shipping_address", marketplace_id, shipping_address, end_user_ctx
        )

    async def update_guest_shipping_option(self, checkout_session_id, marketplace_id, shipping_option, end_user_ctx=None):
        return await self._session_update(
            checkout_session_id, "update_shipping_option", marketplace_id, shipping_option, end_user_ctx
        )

    async def get_guest_purchase_order(
        self,
        purchase_order_id: str,
        marketplace_id: Optional[str] = None,
        end_user_ctx: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("guest_purchase_order", purchase_order_id),
            headers=self._marketplace_headers(marketplace_id, end_user_ctx),
        )
