"""Request and response bodies for the receipts API.

Field names follow the public JSON contract (camelCase); ``to_receipt``
converts a decoded body into the immutable domain ``Receipt``.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.model.PointsModel import PointsBreakdown
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt


class ItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class ReceiptPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[ItemPayload]
    total: str

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            items=tuple(
                ReceiptItem(short_description=item.short_description, price=item.price)
                for item in self.items
            ),
            total=self.total,
        )


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class RuleResultResponse(BaseModel):
    rule: str
    points: int
    detail: str


class PointsBreakdownResponse(BaseModel):
    points: int
    rules: List[RuleResultResponse]

    @classmethod
    def from_breakdown(cls, breakdown: PointsBreakdown) -> "PointsBreakdownResponse":
        return cls(
            points=breakdown.total,
            rules=[
                RuleResultResponse(rule=r.rule, points=r.points, detail=r.detail)
                for r in breakdown.rules
            ],
        )
