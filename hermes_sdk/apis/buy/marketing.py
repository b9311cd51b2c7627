from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class MarketingApi(BaseApi):
    """Buy Marketing API: merchandised (best selling / most watched) products."""

    base_path = "/buy/marketing/v1_beta"

    async def get_merchandised_products(
        self,
        category_id: str,
        metric_name: str,
        aspect_filter: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {
            "category_id": category_id,
            "metric_name": metric_name,
            "aspect_filter": aspect_filter,
            "limit": limit,
        }
        return await self._call("GET", self._path("merchandised_product"), params=params)

    async def get_best_selling_products(self, category_id: str, limit: Optional[int] = None) -> Dict[str, Any]:
        return await self.get_merchandised_products(category_id, "BEST_SELLING", limit=limit)

    async def get_most_watched_products(self, category_id: str, limit: Optional[int] = None) -> Dict[str, Any]:
        return await self.get_merchandised_products(category_id, "MOST_WATCHED", limit=limit)
