from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class RecommendationApi(BaseApi):
    """Sell Recommendation API: promoted listing recommendations."""

    base_path = "/sell/recommendation/v1"

    async def find_listing_recommendations(
        self,
        marketplace_id: str,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        request: Any = None,
    ) -> Optional[Dict[str, Any]]:
        # POST is a query here (listing ids in the body)
        return await self._call(
            "POST",
            self._path("find"),
            params={"filter": filter, "limit": limit, "offset": offset},
            json=request if request is not None else {},
            headers=self._marketplace_headers(marketplace_id),
            retry_safe=True,
        )
