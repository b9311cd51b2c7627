from typing import List, Optional

from pydantic import Field

from hermes_sdk.schemas.base import EbayModel


class TranslateRequest(EbayModel):
    from_language: str = Field(alias="from")
    to_language: str = Field(alias="to")
    text: List[str]
    translation_context: str = "ITEM_TITLE"


class Translation(EbayModel):
    original_text: Optional[str] = None
    translated_text: Optional[str] = None


class TranslateResponse(EbayModel):
    from_language: Optional[str] = Field(default=None, alias="from")
    to_language: Optional[str] = Field(default=None, alias="to")
    translations: List[Translation] = []
