from typing import Any, Dict, List, Optional

from hermes_sdk.apis.base import BaseApi


class AccountApi(BaseApi):
    """Sell Account API: business policies, sales tax, KYC and program eligibility."""

    base_path = "/sell/account/v1"

    async def update_return_policy(self, policy_id: str, policy_request: Any) -> Dict[str, Any]:
        return await self._call("PUT", self._path("return_policy", policy_id), json=policy_request)

    async def delete_return_policy(self, policy_id: str) -> None:
        await self._call("DELETE", self._path("return_policy", policy_id))

    async def create_payment_policy(self, policy_request: Any) -> Dict[str, Any]:
        return await self._call("POST", self._path("payment_policy"), json=policy_request)

    async def create_fulfillment_policy(self, policy_request: Any) -> Dict[str, Any]:
        return await self._call("POST", self._path("fulfillment_policy"), json=policy_request)

    async def get_custom_policies(self, policy_types: Optional[str] = None) -> List[Dict[str, Any]]:
        resp = await self._call(
            "GET",
            self._path("custom_policy") + "/",
            params={"policy_types": policy_types},
        )
        return (resp or {}).get("customPolicies", [])

    async def create_custom_policy(self, policy_request: Any) -> Optional[Dict[str, Any]]:
        return await self._call("POST", self._path("custom_policy") + "/", json=policy_request)

    async def get_sales_taxes(self, country_code: str) -> List[Dict[str, Any]]:
        resp = await self._call("GET", self._path("sales_tax"), params={"country_code": country_code})
        return (resp or {}).get("salesTaxes", [])

    async def create_or_replace_sales_tax(self, country_code: str, jurisdiction_id: str, sales_tax_base: Any) -> None:
        await self._call("PUT", self._path("sales_tax", country_code, jurisdiction_id), json=sales_tax_base)

    async def get_kyc(self) -> Dict[str, Any]:
        return await self._call("GET", self._path("kyc"))

    async def get_advertising_eligibility(
        self,
        marketplace_id: str,
        program_types: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("advertising_eligibility"),
            params={"program_types": program_types},
            headers=self._marketplace_headers(marketplace_id),
        )
