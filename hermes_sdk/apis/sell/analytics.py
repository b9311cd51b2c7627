from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi


class AnalyticsApi(BaseApi):
    """Sell Analytics API: seller standards, customer service metrics, traffic."""

    base_path = "/sell/analytics/v1"

    async def get_customer_service_metric(
        self,
        metric_type: str,
        marketplace_id: str,
        evaluation_type: str,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("customer_service_metric", metric_type, evaluation_type),
            params={"evaluation_marketplace_id": marketplace_id},
        )

    async def find_seller_standards_profiles(self) -> Dict[str, Any]:
        return await self._call("GET", self._path("seller_standards_profile"))

    async def get_seller_standards_profile(self, cycle: str, program: str) -> Dict[str, Any]:
        return await self._call("GET", self._path("seller_standards_profile", program, cycle))

    async def get_traffic_report(
        self,
        dimension: Optional[str] = None,
        filter: Optional[str] = None,
        metric: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {"dimension": dimension, "filter": filter, "metric": metric, "sort": sort}
        return await self._call("GET", self._path("traffic_report"), params=params)

    async def get_current_defect_rate(self, marketplace_id: str) -> Dict[str, Any]:
        return await self.get_customer_service_metric("DEFECT_RATE", marketplace_id, "CURRENT")

    async def get_case_resolution_metrics(self, marketplace_id: str) -> Dict[str, Any]:
        return await self.get_customer_service_metric("CASE_RESOLUTION", marketplace_id, "CURRENT")
