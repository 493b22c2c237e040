"""Tests for BulkEditService."""

import pytest

from catalogsync.exceptions import TransportError, UnsupportedFieldError, ValidationError
from catalogsync.models.product import ProductsPage
from catalogsync.services.bulk_edit_service import PRICE_UPDATES_UNSUPPORTED, BulkEditService
from tests.factories import make_product


@pytest.fixture
def service(mock_client):
    return BulkEditService(mock_client, max_concurrency=5)


@pytest.mark.asyncio
async def test_update_product_price_is_accepted_but_not_applied(service, mock_client):
    result = await service.update_product("x", "price", "19.99")

    assert result is None
    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("field, value", [("price", "abc"), ("price", None), ("stock", None), ("stock", -1)])
async def test_update_product_price_and_stock_any_value_is_a_no_op(service, mock_client, field, value):
    assert await service.update_product("x", field, value) is None
    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_product_name(service, mock_client):
    await service.update_product("x", "name", "New name")

    mock_client.update.assert_awaited_once_with("x", {"name": "New name"})


@pytest.mark.asyncio
async def test_update_product_unsupported_field(service, mock_client):
    with pytest.raises(UnsupportedFieldError):
        await service.update_product("x", "sku", "A-1")

    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_visibility(service, mock_client):
    outcome = await service.bulk_update_visibility(["a", "b"], False)

    assert sorted(outcome.success) == ["a", "b"]
    patches = sorted((call.args[0], call.args[1]) for call in mock_client.update.await_args_list)
    assert patches == [("a", {"isVisible": False}), ("b", {"isVisible": False})]


@pytest.mark.asyncio
async def test_bulk_delete_isolates_failure(service, mock_client):
    async def delete(product_id):
        if product_id == "y":
            raise TransportError("500 Internal Server Error", status_code=500)

    mock_client.delete.side_effect = delete

    outcome = await service.bulk_delete_products(["x", "y"])

    assert outcome.success == ["x"]
    assert len(outcome.failed) == 1
    assert outcome.failed[0].id == "y"
    assert outcome.failed[0].error.startswith("500")


@pytest.mark.asyncio
async def test_bulk_delete_empty(service, mock_client):
    outcome = await service.bulk_delete_products([])

    assert outcome.success == [] and outcome.failed == []
    mock_client.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_add_tag(service, mock_client):
    mock_client.get_many.return_value = [
        make_product("p1", tags=["new"]),
        make_product("p2", tags=["new", "sale"]),
    ]

    outcome = await service.bulk_update_tags(["p1", "p2"], "add", ["sale"])

    assert sorted(outcome.success) == ["p1", "p2"]
    assert outcome.failed == []
    patches = {call.args[0]: call.args[1] for call in mock_client.update.await_args_list}
    assert patches["p1"] == {"tags": ["new", "sale"]}
    assert patches["p2"] == {"tags": ["new", "sale"]}


@pytest.mark.asyncio
async def test_bulk_remove_category(service, mock_client):
    mock_client.get_many.return_value = [make_product("p1", categories=["Art", "Sale"])]

    outcome = await service.bulk_update_categories(["p1"], "remove", ["Sale"])

    assert outcome.success == ["p1"]
    mock_client.update.assert_awaited_once_with("p1", {"categories": ["Art"]})


@pytest.mark.asyncio
async def test_bulk_tags_missing_product_is_a_failure(service, mock_client):
    mock_client.get_many.return_value = [make_product("p1")]

    outcome = await service.bulk_update_tags(["p1", "gone"], "add", ["sale"])

    assert outcome.success == ["p1"]
    assert [(item.id, item.error) for item in outcome.failed] == [("gone", "Product not found: gone")]
    assert [call.args[0] for call in mock_client.update.await_args_list] == ["p1"]


@pytest.mark.asyncio
async def test_bulk_tags_update_failure_is_isolated(service, mock_client):
    mock_client.get_many.return_value = [make_product("p1"), make_product("p2")]

    async def update(product_id, patch):
        if product_id == "p2":
            raise TransportError("Failed to update product p2: Squarespace API error: Bad Request", status_code=400)
        return make_product(product_id, **patch)

    mock_client.update.side_effect = update

    outcome = await service.bulk_update_tags(["p1", "p2"], "add", ["sale"])

    assert outcome.success == ["p1"]
    assert outcome.failed[0].id == "p2"
    assert "p2" in outcome.failed[0].error


@pytest.mark.asyncio
async def test_bulk_tags_uses_fallback_fetch(service, mock_client):
    mock_client.get_many.side_effect = TransportError("Squarespace API error: Bad Gateway")
    mock_client.get.side_effect = lambda product_id: make_product(product_id, tags=["old"])

    outcome = await service.bulk_update_tags(["p1", "p2"], "remove", ["old"])

    assert sorted(outcome.success) == ["p1", "p2"]
    assert all(call.args[1] == {"tags": []} for call in mock_client.update.await_args_list)


@pytest.mark.asyncio
async def test_bulk_tags_empty_delta_makes_no_calls(service, mock_client):
    outcome = await service.bulk_update_tags(["p1", "p2"], "add", [])

    assert outcome.success == ["p1", "p2"]
    mock_client.get_many.assert_not_awaited()
    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_tags_empty_delta_does_not_check_existence(service, mock_client):
    outcome = await service.bulk_update_tags(["ghost"], "add", [])

    assert outcome.success == ["ghost"]
    assert outcome.failed == []
    mock_client.get_many.assert_not_awaited()
    mock_client.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_tags_unknown_action(service):
    with pytest.raises(ValidationError):
        await service.bulk_update_tags(["p1"], "toggle", ["sale"])


@pytest.mark.asyncio
async def test_bulk_prices_reports_every_id_as_not_applied(service, mock_client):
    outcome = await service.bulk_update_prices(["a", "b"], {"type": "percent", "value": 10})

    assert outcome.success == []
    assert [item.id for item in outcome.failed] == ["a", "b"]
    assert all(item.error == PRICE_UPDATES_UNSUPPORTED for item in outcome.failed)
    mock_client.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_prices_rejects_bad_adjustment(service):
    with pytest.raises(ValidationError):
        await service.bulk_update_prices(["a"], {"type": "double", "value": 2})


@pytest.mark.asyncio
async def test_list_all(service, mock_client):
    mock_client.list.return_value = ProductsPage(products=[make_product("a")])

    products = await service.list_all("DIGITAL")

    assert [p.id for p in products] == ["a"]
    assert mock_client.list.await_args.kwargs["type"] == "DIGITAL"
