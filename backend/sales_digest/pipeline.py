"""Pipeline functions for folding IDO records into daily sales totals."""
from __future__ import annotations

import logging
import sys
from decimal import Decimal
from typing import AbstractSet, Any, Iterable, List, Mapping, Optional

from .classify import DEFAULT_SERVICE_CODES, classify_description, classify_product_code
from .models import (
    AggregationResult,
    Category,
    DailySalesTotal,
    LedgerRecord,
    OrderLineRecord,
)

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_MAX_AMOUNT = Decimal(sys.float_info.max)


def _date_part(timestamp: Optional[str]) -> Optional[str]:
    if not timestamp:
        return None
    return timestamp.split(" ")[0] or None


def _parse_amount(raw: Optional[str]) -> Decimal:
    """Parse an upstream amount, coercing unusable values to zero."""

    if raw is None:
        return _ZERO
    try:
        value = Decimal(raw)
    except (ArithmeticError, ValueError):
        return _ZERO
    # Amounts must stay representable once serialised as JSON numbers
    if not value.is_finite() or value.copy_abs() > _MAX_AMOUNT:
        return _ZERO
    return value


def _accumulate(result: AggregationResult, date: str, category: Category, amount: Decimal) -> None:
    bucket = result.setdefault(date, {})
    bucket[category] = bucket.get(category, _ZERO) + amount


def aggregate_order_lines(
    records: Iterable[Any],
    *,
    service_codes: AbstractSet[str] = DEFAULT_SERVICE_CODES,
) -> AggregationResult:
    """Sum order line prices by order date and Product/Service category.

    Records without a date, or whose price is not a positive number, are
    skipped rather than failing the whole aggregation.
    """

    result: AggregationResult = {}
    dropped = 0
    for raw in records:
        if not isinstance(raw, Mapping):
            dropped += 1
            continue
        record = OrderLineRecord.from_raw(raw)
        date = _date_part(record.record_date)
        amount = _parse_amount(record.extended_price)
        if not date or amount <= 0:
            dropped += 1
            continue
        category = classify_product_code(record.product_code, service_codes)
        _accumulate(result, date, category, amount)

    logger.debug("Aggregated order lines into %d days (%d records dropped)", len(result), dropped)
    return result


def resolve_ledger_category(
    record: LedgerRecord,
    service_codes: AbstractSet[str] = DEFAULT_SERVICE_CODES,
) -> Category:
    """Categorise a ledger entry, letting the description override product codes."""

    category = classify_description(record.description)
    if category is not None:
        return category
    return classify_product_code(record.product_code(), service_codes)


def aggregate_ledger_lines(
    records: Iterable[Any],
    *,
    service_codes: AbstractSet[str] = DEFAULT_SERVICE_CODES,
) -> AggregationResult:
    """Sum absolute ledger amounts by invoice date and category."""

    result: AggregationResult = {}
    dropped = 0
    for raw in records:
        if not isinstance(raw, Mapping):
            dropped += 1
            continue
        record = LedgerRecord.from_raw(raw)
        date = _date_part(record.invoice_date)
        amount = abs(_parse_amount(record.amount))
        if not date or amount == 0:
            dropped += 1
            continue
        _accumulate(result, date, resolve_ledger_category(record, service_codes), amount)

    logger.debug("Aggregated ledger lines into %d days (%d records dropped)", len(result), dropped)
    return result


def flatten(result: AggregationResult) -> List[DailySalesTotal]:
    """Emit one row per populated (date, category) pair."""

    return [
        DailySalesTotal(date=date, category=category, amount=amount)
        for date, bucket in result.items()
        for category, amount in bucket.items()
    ]
