from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class FinancesApi(BaseApi):
    """Sell Finances API: payouts, transactions and funds summary."""

    base_path = "/sell/finances/v1"
    host = "apiz"

    async def get_payout(self, marketplace_id: str, payout_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("payout", payout_id),
            headers=self._marketplace_headers(marketplace_id),
        )

    async def get_payouts(
        self,
        marketplace_id: str,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("payout"),
            params={"filter": filter, "limit": limit, "offset": offset, "sort": sort},
            headers=self._marketplace_headers(marketplace_id),
        )

    async def get_seller_funds_summary(self, marketplace_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("seller_funds_summary"),
            headers=self._marketplace_headers(marketplace_id),
        )

    async def get_transactions(
        self,
        marketplace_id: str,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("transaction"),
            params={"filter": filter, "limit": limit, "offset": offset, "sort": sort},
            headers=self._marketplace_headers(marketplace_id),
        )
