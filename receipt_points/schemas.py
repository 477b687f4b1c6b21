from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from .models import Receipt

# Request bodies reject unknown keys
class ItemIn(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

class ReceiptIn(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    total: str
    items: List[ItemIn] = Field(min_length=1)

class IdResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    alphanumeric: Optional[str] = None
    round_total: Optional[str] = Field(default=None, alias="roundTotal")
    multiple_total: Optional[str] = Field(default=None, alias="multipleTotal")
    number_of_items: Optional[str] = Field(default=None, alias="numberOfItems")
    description_multiple: List[str] = Field(default_factory=list, alias="descriptionMultiple")
    odd_day: Optional[str] = Field(default=None, alias="oddDay")
    purchase_time: Optional[str] = Field(default=None, alias="purchaseTime")
    result: int

class ItemOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

class ReceiptOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    total: str
    items: List[ItemOut]

    @classmethod
    def from_receipt(cls, receipt: Receipt) -> "ReceiptOut":
        return cls(
            id=receipt.id,
            retailer=receipt.retailer,
            purchase_date=receipt.purchase_date,
            purchase_time=receipt.purchase_time,
            total=receipt.total,
            items=[ItemOut(short_description=i.short_description, price=i.price) for i in receipt.items],
        )
