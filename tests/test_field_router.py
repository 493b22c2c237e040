"""Tests for the field update router."""

import pytest

from catalogsync.exceptions import UnsupportedFieldError, ValidationError
from catalogsync.models.fields import PriceUpdate, StockUpdate, TagsUpdate, VisibilityUpdate
from catalogsync.services.field_router import (
    apply_field_update,
    build_patch,
    parse_field_update,
    to_patch,
)


@pytest.mark.parametrize(
    "field, value, patch",
    [
        ("name", "Blue Vase", {"name": "Blue Vase"}),
        ("isVisible", False, {"isVisible": False}),
        ("tags", ["sale", "new", "sale"], {"tags": ["sale", "new"]}),
        ("categories", ["Art"], {"categories": ["Art"]}),
    ],
)
def test_build_patch_for_product_fields(field, value, patch):
    assert build_patch(field, value) == patch


@pytest.mark.parametrize("field, value", [("price", "19.99"), ("stock", 3)])
def test_price_and_stock_resolve_to_empty_patch(field, value):
    assert build_patch(field, value) == {}


def test_unsupported_field_names_the_field():
    with pytest.raises(UnsupportedFieldError) as exc_info:
        build_patch("weight", 3)

    assert exc_info.value.field == "weight"
    assert "weight" in str(exc_info.value)


def test_value_type_mismatch_rejected_before_any_call():
    with pytest.raises(ValidationError):
        parse_field_update("isVisible", "yes")

    with pytest.raises(ValidationError):
        parse_field_update("tags", "sale")


def test_parse_returns_typed_update():
    update = parse_field_update("price", "19.99")

    assert isinstance(update, PriceUpdate)
    assert update.value == "19.99"


@pytest.mark.parametrize(
    "field, value",
    [("price", "abc"), ("price", None), ("stock", -1), ("stock", "lots"), ("stock", None)],
)
def test_price_and_stock_accept_any_value(field, value):
    assert build_patch(field, value) == {}


def test_to_patch_rejects_unknown_update_type():
    class WeightUpdate:
        field = "weight"

    with pytest.raises(UnsupportedFieldError):
        to_patch(WeightUpdate())


@pytest.mark.asyncio
async def test_apply_sends_non_empty_patch(mock_client):
    await apply_field_update(mock_client, "p1", TagsUpdate(value=["sale"]))

    mock_client.update.assert_awaited_once_with("p1", {"tags": ["sale"]})


@pytest.mark.asyncio
async def test_apply_skips_network_for_empty_patch(mock_client):
    result = await apply_field_update(mock_client, "p1", StockUpdate(value=4))

    assert result is None
    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_apply_visibility(mock_client):
    await apply_field_update(mock_client, "p1", VisibilityUpdate(value=True))

    mock_client.update.assert_awaited_once_with("p1", {"isVisible": True})


@pytest.mark.asyncio
@pytest.mark.parametrize("update", [PriceUpdate(value="abc"), StockUpdate()])
async def test_apply_ignores_malformed_price_and_stock(mock_client, update):
    assert await apply_field_update(mock_client, "x", update) is None
    mock_client.update.assert_not_awaited()
