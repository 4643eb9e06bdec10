"""Product code classification tests."""

from __future__ import annotations

import pytest

from sales_digest import Category, classify_product_code
from sales_digest.classify import classify_description


@pytest.mark.parametrize("code", [None, "", "   "])
def test_missing_code_defaults_to_product(code):
    assert classify_product_code(code) is Category.PRODUCT


@pytest.mark.parametrize("code", ["sv", " SV ", "Service", "svr"])
def test_service_codes_match_case_insensitively(code):
    assert classify_product_code(code) is Category.SERVICE


def test_unknown_code_is_product():
    assert classify_product_code("widget") is Category.PRODUCT


def test_custom_service_codes():
    codes = frozenset({"LABOR"})
    assert classify_product_code("labor", codes) is Category.SERVICE
    assert classify_product_code("SV", codes) is Category.PRODUCT


def test_non_string_codes_are_stringified():
    assert classify_product_code(42) is Category.PRODUCT


def test_freight_wins_over_misc():
    assert classify_description("Misc freight surcharge") is Category.FREIGHT
    assert classify_description("MISC adjustment") is Category.MISC
    assert classify_description("Invoice 1001") is None
    assert classify_description(None) is None
