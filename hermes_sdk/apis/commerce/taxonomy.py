from typing import Any, Dict, Optional

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.core.constants import DEFAULT_MARKETPLACE_ID
from hermes_sdk.schemas.taxonomy import BaseCategoryTree, CategorySuggestionResponse, CategoryTree


class TaxonomyApi(BaseApi):
    """Commerce Taxonomy API: category trees, suggestions and item aspects."""

    base_path = "/commerce/taxonomy/v1"

    async def get_default_category_tree_id(self, marketplace_id: str = DEFAULT_MARKETPLACE_ID) -> BaseCategoryTree:
        return await self._call(
            "GET",
            self._path("get_default_category_tree_id"),
            params={"marketplace_id": marketplace_id},
            response_model=BaseCategoryTree,
        )

    async def get_category_tree(self, category_tree_id: str, accept_encoding: Optional[str] = None) -> CategoryTree:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id),
            headers={"Accept-Encoding": accept_encoding},
            response_model=CategoryTree,
        )

    async def get_category_subtree(
        self,
        category_id: str,
        category_tree_id: str,
        accept_encoding: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_category_subtree"),
            params={"category_id": category_id},
            headers={"Accept-Encoding": accept_encoding},
        )

    async def get_category_suggestions(self, category_tree_id: str, query: str) -> CategorySuggestionResponse:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_category_suggestions"),
            params={"q": query},
            response_model=CategorySuggestionResponse,
        )

    async def fetch_item_aspects(self, category_tree_id: str) -> bytes:
        """Aspects for every leaf category, delivered by eBay as a gzipped JSON file."""
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "fetch_item_aspects"),
            response_model=bytes,
        )

    async def get_item_aspects_for_category(self, category_id: str, category_tree_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_item_aspects_for_category"),
            params={"category_id": category_id},
        )

    async def get_compatibility_properties(self, category_tree_id: str, category_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_compatibility_properties"),
            params={"category_id": category_id},
        )

    async def get_compatibility_property_values(
        self,
        category_tree_id: str,
        compatibility_property: str,
        category_id: str,
        filter: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "compatibility_property": compatibility_property,
            "category_id": category_id,
            "filter": filter,
        }
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_compatibility_property_values"),
            params=params,
        )

    async def get_expired_categories(self, category_tree_id: str) -> Dict[str, Any]:
        return await self._call(
            "GET",
            self._path("category_tree", category_tree_id, "get_expired_categories"),
        )
