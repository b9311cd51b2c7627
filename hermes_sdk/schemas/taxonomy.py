from typing import List, Optional

from hermes_sdk.schemas.base import EbayModel


class BaseCategoryTree(EbayModel):
    category_tree_id: str
    category_tree_version: Optional[str] = None


class Category(EbayModel):
    category_id: str
    category_name: Optional[str] = None


class CategoryTreeNode(EbayModel):
    category: Category
    category_tree_node_level: Optional[int] = None
    leaf_category_tree_node: Optional[bool] = None
    parent_category_tree_node_href: Optional[str] = None
    child_category_tree_nodes: List["CategoryTreeNode"] = []


CategoryTreeNode.model_rebuild()


class CategoryTree(BaseCategoryTree):
    applicable_marketplace_ids: List[str] = []
    root_category_node: Optional[CategoryTreeNode] = None


class CategorySuggestion(EbayModel):
    category: Category
    category_tree_node_level: Optional[int] = None
    relevancy: Optional[str] = None


class CategorySuggestionResponse(EbayModel):
    category_tree_id: Optional[str] = None
    category_tree_version: Optional[str] = None
    category_suggestions: List[CategorySuggestion] = []
