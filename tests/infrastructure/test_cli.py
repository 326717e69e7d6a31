"""End-to-end tests for the click CLI against a mocked inventory API."""

import json

import httpx
import pytest
from click.testing import CliRunner

from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.cli.main import cli
from shopcart.infrastructure.http.inventory_client import HttpInventoryClient

KEY = "@RocketShoes:cart"

ROUTES = {
    "/stock/1": {"id": 1, "amount": 2},
    "/products/1": {"id": 1, "title": "Running shoe", "price": 179.9, "image": "shoe.jpg"},
}


@pytest.fixture
def storage(tmp_path, monkeypatch):
    path = tmp_path / "cart.json"
    monkeypatch.setenv("SHOPCART_STORAGE_PATH", str(path))
    monkeypatch.setenv("SHOPCART_API_URL", "http://inventory.test")

    def mocked_client(settings):
        def handler(request: httpx.Request) -> httpx.Response:
            payload = ROUTES.get(request.url.path)
            if payload is None:
                return httpx.Response(404, json={})
            return httpx.Response(200, json=payload)

        return HttpInventoryClient(
            settings.api_url,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    monkeypatch.setattr(bootstrap, "inventory_client", mocked_client)
    return path


def _stored(path):
    return json.loads(path.read_text(encoding="utf-8"))[KEY]


def test_show_empty_cart(storage):
    result = CliRunner().invoke(cli, ["cart", "show"])
    assert result.exit_code == 0
    assert "Your cart is empty." in result.output


def test_add_then_show(storage):
    runner = CliRunner()
    result = runner.invoke(cli, ["cart", "add", "--id", "1"])
    assert result.exit_code == 0, result.output
    assert "Running shoe" in result.output
    assert _stored(storage)[0]["amount"] == 1

    result = runner.invoke(cli, ["cart", "show"])
    assert "$179.90" in result.output


def test_add_beyond_stock_fails(storage):
    runner = CliRunner()
    runner.invoke(cli, ["cart", "add", "--id", "1"])
    runner.invoke(cli, ["cart", "add", "--id", "1"])
    result = runner.invoke(cli, ["cart", "add", "--id", "1"])
    assert result.exit_code == 1
    assert "out of stock" in result.output
    assert _stored(storage)[0]["amount"] == 2


def test_remove_absent_product_fails(storage):
    result = CliRunner().invoke(cli, ["cart", "remove", "--id", "5"])
    assert result.exit_code == 1
    assert "Error removing product" in result.output


def test_update_zero_is_noop(storage):
    result = CliRunner().invoke(cli, ["cart", "update", "--id", "1", "--amount", "0"])
    assert result.exit_code == 0
    assert "Nothing to do." in result.output
    assert not storage.exists()


def test_invalid_timeout_reported(storage, monkeypatch):
    monkeypatch.setenv("SHOPCART_HTTP_TIMEOUT", "soon")
    result = CliRunner().invoke(cli, ["cart", "show"])
    assert result.exit_code == 1
    assert "SHOPCART_HTTP_TIMEOUT" in result.output


def test_show_with_unreadable_record_falls_back_to_empty(storage):
    storage.write_text(
        json.dumps({KEY: [{"id": 1, "title": None, "price": 1, "image": None, "amount": 1}]}),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["cart", "show"])
    assert result.exit_code == 0, result.output
    assert "Your cart is empty." in result.output
