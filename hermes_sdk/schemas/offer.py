from typing import List, Optional

from hermes_sdk.schemas.base import EbayModel
from hermes_sdk.schemas.browse import Amount


class Bidding(EbayModel):
    item_id: Optional[str] = None
    auction_status: Optional[str] = None
    auction_end_date: Optional[str] = None
    current_price: Optional[Amount] = None
    bid_count: Optional[int] = None
    high_bidder: Optional[bool] = None
    suggested_bid_amounts: List[Amount] = []
