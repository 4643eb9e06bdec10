"""Core package for the daily sales aggregation pipeline."""

from .classify import DEFAULT_SERVICE_CODES, classify_product_code
from .models import Category, DailySalesTotal, LedgerRecord, OrderLineRecord
from .pipeline import aggregate_ledger_lines, aggregate_order_lines, flatten

__all__ = [
    "Category",
    "DailySalesTotal",
    "LedgerRecord",
    "OrderLineRecord",
    "DEFAULT_SERVICE_CODES",
    "classify_product_code",
    "aggregate_order_lines",
    "aggregate_ledger_lines",
    "flatten",
]
