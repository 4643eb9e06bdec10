"""Domain models used by the sales aggregation pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple


class Category(str, Enum):
    """Sales classification assigned to every contributing record."""

    PRODUCT = "Product"
    SERVICE = "Service"
    MISC = "Misc"
    FREIGHT = "Freight"


DailyBucket = Dict[Category, Decimal]
AggregationResult = Dict[str, DailyBucket]


def _field(raw: Mapping[str, Any], name: str) -> Optional[str]:
    value = raw.get(name)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class OrderLineRecord:
    """Customer order line read from the ``SLCoitems`` collection."""

    IDO_NAME: ClassVar[str] = "SLCoitems"
    PROPERTIES: ClassVar[Tuple[str, ...]] = (
        "RecordDate",
        "ExtendedPrice",
        "WBItProductCode",
    )

    record_date: Optional[str] = None
    extended_price: Optional[str] = None
    product_code: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "OrderLineRecord":
        return cls(
            record_date=_field(raw, "RecordDate"),
            extended_price=_field(raw, "ExtendedPrice"),
            product_code=_field(raw, "WBItProductCode"),
        )


@dataclass(frozen=True)
class LedgerRecord:
    """Sales ledger entry read from the ``SLLedgers`` collection."""

    IDO_NAME: ClassVar[str] = "SLLedgers"
    PROPERTIES: ClassVar[Tuple[str, ...]] = (
        "FRDerInvDate",
        "DomAmount",
        "FRDerDescription",
        "DerItemProductCode",
        "ItemProductCode",
        "NonInvItemProductCode",
    )

    invoice_date: Optional[str] = None
    amount: Optional[str] = None
    description: Optional[str] = None
    der_item_product_code: Optional[str] = None
    item_product_code: Optional[str] = None
    non_inv_item_product_code: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "LedgerRecord":
        return cls(
            invoice_date=_field(raw, "FRDerInvDate"),
            amount=_field(raw, "DomAmount"),
            description=_field(raw, "FRDerDescription"),
            der_item_product_code=_field(raw, "DerItemProductCode"),
            item_product_code=_field(raw, "ItemProductCode"),
            non_inv_item_product_code=_field(raw, "NonInvItemProductCode"),
        )

    def product_code(self) -> Optional[str]:
        """Return the first populated product code in precedence order."""

        return (
            self.der_item_product_code
            or self.item_product_code
            or self.non_inv_item_product_code
        )


@dataclass(frozen=True)
class DailySalesTotal:
    """One flattened (date, category, amount) row of an aggregation."""

    date: str
    category: Category
    amount: Decimal
