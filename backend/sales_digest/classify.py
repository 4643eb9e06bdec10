"""Product code heuristics for sales categories."""
from __future__ import annotations

from typing import AbstractSet, Any, Optional

from .models import Category

DEFAULT_SERVICE_CODES: frozenset[str] = frozenset({"SERVICE", "SV", "SVR"})


def normalize_code(product_code: Any) -> str:
    """Return the trimmed, upper-cased form of a product code."""

    if product_code is None:
        return ""
    return str(product_code).strip().upper()


def classify_product_code(
    product_code: Any,
    service_codes: AbstractSet[str] = DEFAULT_SERVICE_CODES,
) -> Category:
    """Map a product code to ``Service`` or ``Product``.

    Missing or blank codes default to ``Product``.
    """

    code = normalize_code(product_code)
    if code and code in service_codes:
        return Category.SERVICE
    return Category.PRODUCT


def classify_description(description: Optional[str]) -> Optional[Category]:
    """Return ``Freight`` or ``Misc`` when the ledger description says so."""

    text = (description or "").lower()
    if "freight" in text:
        return Category.FREIGHT
    if "misc" in text:
        return Category.MISC
    return None


__all__ = [
    "DEFAULT_SERVICE_CODES",
    "classify_description",
    "classify_product_code",
    "normalize_code",
]
