from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.core.constants import HEADER_ACCEPT_LANGUAGE


class MetadataApi(BaseApi):
    """Sell Metadata API: per-marketplace listing policies."""

    base_path = "/sell/metadata/v1"

    async def _marketplace_policy(self, marketplace_id: str, resource: str, filter: Optional[str]) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("marketplace", marketplace_id, resource),
            params={"filter": filter},
        )

    async def get_category_policies(self, marketplace_id: str, filter: Optional[str] = None) -> Dict[str, Any]:
        return await self._marketplace_policy(marketplace_id, "get_category_policies", filter)

    async def get_item_condition_policies(self, marketplace_id: str, filter: Optional[str] = None) -> Dict[str, Any]:
        return await self._marketplace_policy(marketplace_id, "get_item_condition_policies", filter)

    async def get_return_policies(self, marketplace_id: str, filter: Optional[str] = None) -> Dict[str, Any]:
        return await self._marketplace_policy(marketplace_id, "get_return_policies", filter)

    async def get_shipping_policies(self, marketplace_id: str, filter: Optional[str] = None) -> Dict[str, Any]:
        return await self._marketplace_policy(marketplace_id, "get_shipping_policies", filter)

    async def get_currencies(self, marketplace_id: str, accept_language: Optional[str] = None) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("marketplace", marketplace_id, "get_currencies"),
            headers={HEADER_ACCEPT_LANGUAGE: accept_language},
        )
