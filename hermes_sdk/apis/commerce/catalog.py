from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class CatalogApi(BaseApi):
    """Commerce Catalog API: eBay product catalog (ePID) lookups."""

    base_path = "/commerce/catalog/v1_beta"

    async def get_product(self, epid: str, marketplace_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("product", epid),
            headers=self._marketplace_headers(marketplace_id),
        )

    async def search_catalog(
        self,
        marketplace_id: Optional[str] = None,
        aspect_filter: Optional[str] = None,
        category_ids: Optional[str] = None,
        fieldgroups: Optional[str] = None,
        gtin: Optional[str] = None,
        limit: Optional[int] = None,
        mpn: Optional[str] = None,
        offset: Optional[int] = None,
        query: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "aspect_filter": aspect_filter,
            "category_ids": category_ids,
            "fieldgroups": fieldgroups,
            "gtin": gtin,
            "limit": limit,
            "mpn": mpn,
            "offset": offset,
            "q": query,
        }
        return await self._call(
            "GET",
            self._path("product_summary", "search"),
            params=params,
            headers=self._marketplace_headers(marketplace_id),
        )
