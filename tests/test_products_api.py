"""Tests for the /api/products endpoints."""

import pytest


def test_list_products_empty(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": []}


def test_create_then_list_scenario(client, sample_product):
    resp = client.post("/api/products", json=sample_product)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    product = body["data"]
    assert product["id"]
    assert product == {"id": product["id"], "name": "Widget", "price": 9.99, "category": "Tools"}

    listed = client.get("/api/products")
    assert listed.status_code == 200
    assert listed.json() == {"success": True, "data": [product]}


@pytest.mark.parametrize("price", [0, 0.0, 1, 9.99, 1000000])
def test_non_negative_prices_are_accepted(client, price):
    resp = client.post("/api/products", json={"name": "Thing", "price": price, "category": "Misc"})
    assert resp.status_code == 201
    assert resp.json()["data"]["price"] == price


@pytest.mark.parametrize("price", [-0.01, -5, "9.99", "cheap", None, True, [1]])
def test_invalid_prices_are_rejected(client, price):
    resp = client.post("/api/products", json={"name": "Thing", "price": price, "category": "Misc"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["error"].startswith("price")
    assert client.get("/api/products").json()["data"] == []


def test_negative_price_message(client):
    resp = client.post("/api/products", json={"name": "Thing", "price": -1, "category": "Misc"})
    assert resp.json()["error"] == "price: must not be negative"


@pytest.mark.parametrize(
    "payload",
    [
        {"price": 1, "category": "Misc"},
        {"name": "Thing", "category": "Misc"},
        {"name": "Thing", "price": 1},
        {"name": "", "price": 1, "category": "Misc"},
        {"name": "Thing", "price": 1, "category": "  "},
    ],
)
def test_missing_or_blank_fields_are_rejected(client, payload):
    resp = client.post("/api/products", json=payload)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_products_and_users_are_separate_collections(client, sample_product, sample_user):
    client.post("/api/products", json=sample_product)
    assert client.get("/api/users").json()["data"] == []
    assert len(client.get("/api/products").json()["data"]) == 1


def test_integer_price_keeps_its_type(client):
    resp = client.post("/api/products", json={"name": "Bolt", "price": 5, "category": "Tools"})
    price = resp.json()["data"]["price"]
    assert price == 5
    assert isinstance(price, int)
    listed = client.get("/api/products").json()["data"][0]["price"]
    assert isinstance(listed, int)


def test_fractional_price_stays_float(client):
    resp = client.post("/api/products", json={"name": "Nut", "price": 2.5, "category": "Tools"})
    assert resp.json()["data"]["price"] == 2.5
