"""Pydantic schema exports."""

from .sales import DailySalesSchema, ErrorResponse

__all__ = ["DailySalesSchema", "ErrorResponse"]
