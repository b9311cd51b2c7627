from typing import Optional

from hermes_sdk.schemas.base import EbayModel


class UserResponse(EbayModel):
    user_id: Optional[str] = None
    username: Optional[str] = None
    account_type: Optional[str] = None
    registration_marketplace_id: Optional[str] = None
    status: Optional[str] = None
