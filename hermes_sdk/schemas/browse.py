from typing import List, Optional

from hermes_sdk.schemas.base import EbayModel


class Amount(EbayModel):
    value: Optional[str] = None
    currency: Optional[str] = None


class Image(EbayModel):
    image_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class ItemSummary(EbayModel):
    item_id: str
    title: Optional[str] = None
    price: Optional[Amount] = None
    condition: Optional[str] = None
    condition_id: Optional[str] = None
    image: Optional[Image] = None
    item_web_url: Optional[str] = None
    buying_options: List[str] = []
    legacy_item_id: Optional[str] = None


class SearchPagedCollection(EbayModel):
    href: Optional[str] = None
    total: int = 0
    limit: Optional[int] = None
    offset: Optional[int] = None
    next: Optional[str] = None
    prev: Optional[str] = None
    item_summaries: List[ItemSummary] = []


class Item(EbayModel):
    item_id: str
    title: Optional[str] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Amount] = None
    condition: Optional[str] = None
    category_id: Optional[str] = None
    category_path: Optional[str] = None
    image: Optional[Image] = None
    additional_images: List[Image] = []
    item_web_url: Optional[str] = None
    legacy_item_id: Optional[str] = None


class Items(EbayModel):
    items: List[Item] = []
    total: Optional[int] = None


class ItemGroup(EbayModel):
    items: List[Item] = []
    common_descriptions: List[dict] = []


class CompatibilityResponse(EbayModel):
    compatibility_status: Optional[str] = None
    warnings: List[dict] = []
