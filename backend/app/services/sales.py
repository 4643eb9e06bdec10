"""Daily sales totals computed from IDO collections."""

from __future__ import annotations

from app.config import AppSettings
from app.providers.ido_service import IDOClient
from sales_digest import (
    DailySalesTotal,
    LedgerRecord,
    OrderLineRecord,
    aggregate_ledger_lines,
    aggregate_order_lines,
    flatten,
)


async def order_sales_by_day(client: IDOClient, settings: AppSettings) -> list[DailySalesTotal]:
    """Product/Service totals keyed by order line record date."""

    items = await client.load_collection(
        OrderLineRecord.IDO_NAME,
        OrderLineRecord.PROPERTIES,
        filter=settings.order_filter,
    )
    return flatten(aggregate_order_lines(items, service_codes=settings.service_codes))


async def invoice_sales_by_day(client: IDOClient, settings: AppSettings) -> list[DailySalesTotal]:
    """Product/Service/Misc/Freight totals keyed by ledger invoice date."""

    items = await client.load_collection(
        LedgerRecord.IDO_NAME,
        LedgerRecord.PROPERTIES,
        filter=settings.invoice_filter,
    )
    return flatten(aggregate_ledger_lines(items, service_codes=settings.service_codes))


__all__ = ["order_sales_by_day", "invoice_sales_by_day"]
