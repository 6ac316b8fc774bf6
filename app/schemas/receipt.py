"""
Receipt schemas: the submitted purchase record and the API envelopes.

Every field arrives as a string and is stored as-is; the scoring rules do
their own parsing and tolerate malformed values.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Item(BaseModel):
    """One purchased line entry."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: StrictStr = Field(..., alias="shortDescription")
    price: StrictStr = Field(..., description='Decimal amount, e.g. "3.00"')


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: StrictStr
    purchase_date: StrictStr = Field(..., alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: StrictStr = Field(..., alias="purchaseTime", description="HH:MM, 24-hour")
    total: StrictStr
    items: tuple[Item, ...]


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
