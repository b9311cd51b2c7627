from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class ComplianceApi(BaseApi):
    """Sell Compliance API: listing violations and their suppression."""

    base_path = "/sell/compliance/v1"

    async def get_listing_violations(
        self,
        marketplace_id: str,
        compliance_type: str,
        offset: Optional[int] = None,
        listing_id: Optional[str] = None,
        limit: Optional[int] = None,
        filter: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "compliance_type": compliance_type,
            "offset": offset,
            "listing_id": listing_id,
            "limit": limit,
            "filter": filter,
        }
        return await self._call(
            "GET",
            self._path("listing_violation"),
            params=params,
            headers=self._marketplace_headers(marketplace_id),
        )

    async def suppress_violation(self, marketplace_id: str, suppress_request: Any) -> None:
        await self._call(
            "POST",
            self._path("suppress_listing_violation"),
            json=suppress_request,
            headers=self._marketplace_headers(marketplace_id),
        )

    async def get_listing_violations_summary(
        self,
        marketplace_id: str,
        compliance_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("listing_violation_summary"),
            params={"compliance_type": compliance_type},
            headers=self._marketplace_headers(marketplace_id),
        )

    async def get_product_adoption_violations(
        self,
        marketplace_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        return await self.get_listing_violations(marketplace_id, "PRODUCT_ADOPTION", offset=offset, limit=limit)

    async def get_listing_policy_violations(
        self,
        marketplace_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        return await self.get_listing_violations(marketplace_id, "LISTING_POLICY", offset=offset, limit=limit)
