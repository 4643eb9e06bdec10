"""Response schemas for the daily sales endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from sales_digest import DailySalesTotal


class DailySalesSchema(BaseModel):
    date: str = Field(..., examples=["2024-01-05"])
    type: Literal["Product", "Service", "Misc", "Freight"]
    amount: float

    model_config = {
        "json_schema_extra": {
            "example": {"date": "2024-01-05", "type": "Service", "amount": 100.5},
        }
    }

    @classmethod
    def from_total(cls, total: DailySalesTotal) -> "DailySalesSchema":
        return cls(date=total.date, type=total.category.value, amount=float(total.amount))


class ErrorResponse(BaseModel):
    error: str


__all__ = ["DailySalesSchema", "ErrorResponse"]
