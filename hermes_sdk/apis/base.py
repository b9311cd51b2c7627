from typing import Any, Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel

from hermes_sdk.core.constants import HEADER_END_USER_CTX, HEADER_MARKETPLACE_ID
from hermes_sdk.services.ebay_client import RequestExecutor


class BaseApi:
    """
    One eBay API family. Holds a reference to the client's shared RequestExecutor,
    so every family uses the same token cache and retry policy.
    """

    base_path: str = ""
    host: str = "api"

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def _path(self, *segments: Any) -> str:
        # ids such as SKUs may contain "/" and must stay a single segment
        return self.base_path + "".join("/" + quote(str(s), safe="") for s in segments)

    @staticmethod
    def _payload(body: Any) -> Any:
        if isinstance(body, BaseModel):
            return body.model_dump(by_alias=True, exclude_none=True, mode="json")
        return body

    @staticmethod
    def _marketplace_headers(
        marketplace_id: Optional[str] = None,
        end_user_ctx: Optional[str] = None,
        **extra: Optional[str],
    ) -> Dict[str, Optional[str]]:
        headers = {HEADER_MARKETPLACE_ID: marketplace_id, HEADER_END_USER_CTX: end_user_ctx}
        headers.update(extra)
        return headers

    async def _call(self, method: str, path: str, *, json: Any = None, **kwargs) -> Any:
        kwargs.setdefault("host", self.host)
        return await self.executor.request(method, path, json=self._payload(json), **kwargs)
