"""
Unit tests for the payload helpers
"""
import pytest
from fastapi import HTTPException

from localbiz.models import PRODUCT_CATEGORIES
from localbiz.utils import clean_str, require_fields, parse_choice, parse_price, parse_bool


class TestParsePrice:

    @pytest.mark.parametrize("raw, expected", [(0, 0.0), ("12.5", 12.5), (19.999, 20.0), (" 3 ", 3.0)])
    def test_valid(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", [-0.01, "abc", "", True, "nan", "inf"])
    def test_invalid(self, raw):
        with pytest.raises(HTTPException) as exc:
            parse_price(raw)
        assert exc.value.status_code == 400


class TestParseBool:

    @pytest.mark.parametrize("raw, expected", [(True, True), (False, False), ("true", True), ("0", False)])
    def test_valid(self, raw, expected):
        assert parse_bool(raw, "availability") is expected

    def test_invalid(self):
        with pytest.raises(HTTPException):
            parse_bool("maybe", "availability")


class TestFields:

    def test_clean_str(self):
        assert clean_str(None) == ""
        assert clean_str("  Pizza ") == "Pizza"
        assert clean_str(0) == "0"

    def test_require_fields_rejects_blank(self):
        with pytest.raises(HTTPException) as exc:
            require_fields({"name": "  ", "city": "NY"}, "name", "city")
        assert exc.value.detail == "Please provide all required fields"

    def test_parse_choice(self):
        assert parse_choice(" Books ", PRODUCT_CATEGORIES, "category") == "Books"
        with pytest.raises(HTTPException):
            parse_choice("books", PRODUCT_CATEGORIES, "category")
