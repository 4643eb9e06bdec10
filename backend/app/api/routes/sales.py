"""Daily sales endpoints consumed by the order and invoice dashboards."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies.ido import get_app_settings, get_ido_client
from app.config import AppSettings
from app.providers.ido_service import IDOClient, IDOServiceError
from app.schemas.sales import DailySalesSchema, ErrorResponse
from app.services import sales as sales_service

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


def _failure(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("/order", response_model=list[DailySalesSchema], responses=_ERROR_RESPONSES)
async def get_order_sales(
    client: IDOClient = Depends(get_ido_client),
    settings: AppSettings = Depends(get_app_settings),
) -> list[DailySalesSchema] | JSONResponse:
    """Sales by order/ship date split into Product and Service."""

    try:
        totals = await sales_service.order_sales_by_day(client, settings)
    except IDOServiceError as exc:
        logger.error("Failed to load order data: %s", exc)
        return _failure("Failed to load order data")
    return [DailySalesSchema.from_total(total) for total in totals]


@router.get("/invoice", response_model=list[DailySalesSchema], responses=_ERROR_RESPONSES)
async def get_invoice_sales(
    client: IDOClient = Depends(get_ido_client),
    settings: AppSettings = Depends(get_app_settings),
) -> list[DailySalesSchema] | JSONResponse:
    """Sales by invoice date split into Product, Service, Misc and Freight."""

    try:
        totals = await sales_service.invoice_sales_by_day(client, settings)
    except IDOServiceError as exc:
        logger.error("Failed to load invoice data: %s", exc)
        return _failure("Failed to load invoice data")
    return [DailySalesSchema.from_total(total) for total in totals]


__all__ = ["router"]
