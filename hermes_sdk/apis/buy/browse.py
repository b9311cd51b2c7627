import base64
from typing import Any, Dict, List, Optional

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.schemas.browse import (
    CompatibilityResponse,
    Item,
    ItemGroup,
    Items,
    SearchPagedCollection,
)


class BrowseApi(BaseApi):
    """Buy Browse API: item search and item details."""

    base_path = "/buy/browse/v1"

    async def search_items(self, query: str, limit: Optional[int] = None) -> SearchPagedCollection:
        return await self.search_items_advanced(query=query, limit=limit)

    async def search_items_advanced(
        self,
        query: Optional[str] = None,
        aspect_filter: Optional[str] = None,
        category_ids: Optional[str] = None,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        marketplace_id: Optional[str] = None,
    ) -> SearchPagedCollection:
        params = {
            "q": query,
            "aspect_filter": aspect_filter,
            "category_ids": category_ids,
            "filter": filter,
            "limit": limit,
            "offset": offset,
            "sort": sort,
        }
        return await self._call(
            "GET",
            self._path("item_summary", "search"),
            params=params,
            headers=self._marketplace_headers(marketplace_id),
            response_model=SearchPagedCollection,
        )

    async def get_item(self, item_id: str, fieldgroups: Optional[str] = None) -> Item:
        return await self._call(
            "GET",
            self._path("item", item_id),
            params={"fieldgroups": fieldgroups},
            response_model=Item,
        )

    async def get_item_by_legacy_id(self, legacy_item_id: str, fieldgroups: Optional[str] = None) -> Item:
        return await self._call(
            "GET",
            self._path("item", "get_item_by_legacy_id"),
            params={"legacy_item_id": legacy_item_id, "fieldgroups": fieldgroups},
            response_model=Item,
        )

    async def get_items(self, item_ids: Optional[str] = None, item_group_ids: Optional[str] = None) -> Items:
        return await self._call(
            "GET",
            self._path("item") + "/",
            params={"item_ids": item_ids, "item_group_ids": item_group_ids},
            response_model=Items,
        )

    async def get_items_by_item_group(self, item_group_id: str, fieldgroups: Optional[str] = None) -> ItemGroup:
        return await self._call(
            "GET",
            self._path("item", "get_items_by_item_group"),
            params={"item_group_id": item_group_id, "fieldgroups": fieldgroups},
            response_model=ItemGroup,
        )

    async def check_compatibility(
        self,
        item_id: str,
        compatibility_properties: List[Dict[str, Any]],
    ) -> CompatibilityResponse:
        # read-only despite POST
        return await self._call(
            "POST",
            self._path("item", item_id, "check_compatibility"),
            json={"compatibilityProperties": compatibility_properties},
            retry_safe=True,
            response_model=CompatibilityResponse,
        )

    async def search_by_image(
        self,
        image_data: bytes,
        category_ids: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> SearchPagedCollection:
        return await self._call(
            "POST",
            self._path("item_summary", "search_by_image"),
            params={"category_ids": category_ids, "limit": limit},
            json={"image": base64.b64encode(image_data).decode("ascii")},
            retry_safe=True,
            response_model=SearchPagedCollection,
        )
