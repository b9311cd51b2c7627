from typing import Optional

from hermes_sdk.apis.base import BaseApi


class FeedApi(BaseApi):
    """
    Buy Feed API. Feed files are gzipped TSV, returned as raw bytes;
    large files are downloaded in chunks selected with the Range header (e.g. "bytes=0-10485760").
    """

    base_path = "/buy/feed/v1_beta"

    async def _feed(self, resource: str, marketplace_id: str, range: Optional[str], params: dict) -> bytes:
        return await self._call(
            "GET",
            self._path(resource),
            params=params,
            headers=self._marketplace_headers(marketplace_id, **{"Range": range}),
            response_model=bytes,
        )

    async def get_item_feed(
        self,
        marketplace_id: str,
        range: str,
        feed_scope: str,
        category_id: str,
        date: Optional[str] = None,
    ) -> bytes:
        params = {"feed_scope": feed_scope, "category_id": category_id, "date": date}
        return await self._feed("item", marketplace_id, range, params)

    async def get_item_group_feed(
        self,
        marketplace_id: str,
        feed_scope: str,
        category_id: str,
        range: Optional[str] = None,
        date: Optional[str] = None,
    ) -> bytes:
        params = {"feed_scope": feed_scope, "category_id": category_id, "date": date}
        return await self._feed("item_group", marketplace_id, range, params)

    async def get_item_priority_feed(self, marketplace_id: str, range: str, category_id: str, date: str) -> bytes:
        return await self._feed("item_priority", marketplace_id, range, {"category_id": category_id, "date": date})

    async def get_item_snapshot_feed(
        self,
        marketplace_id: str,
        range: str,
        category_id: str,
        snapshot_date: str,
    ) -> bytes:
        params = {"category_id": category_id, "snapshot_date": snapshot_date}
        return await self._feed("item_snapshot", marketplace_id, range, params)
