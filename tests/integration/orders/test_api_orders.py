"""Integration tests for the order endpoints.

Covers:
- Success 201: order placed, snapshot prices, stock decremented.
- Validation 400: malformed payloads.
- Placement failures 404/409: customer, products, sold out, stock.
- Retrieval: 200 for an existing order, 404 otherwise.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Order Customer", email="orders@example.com")


@pytest.fixture()
def product_a():
    return Product.objects.create(name="Product A", price=Decimal("5.00"), quantity=10)


@pytest.fixture()
def product_b():
    return Product.objects.create(name="Product B", price=Decimal("2.50"), quantity=3)


@pytest.fixture()
def sold_out():
    return Product.objects.create(name="Sold Out", price=Decimal("1.00"), quantity=0)


def _payload(customer_id, *items):
    return {
        "customer_id": str(customer_id),
        "items": [{"product_id": str(pid), "quantity": q} for pid, q in items],
    }


# ===========================================================================
# Create
# ===========================================================================


class TestPlaceOrderSuccess:
    def test_returns_201_with_snapshot_prices(self, api_client, customer, product_a):
        response = api_client.post(
            URL, _payload(customer.id, (product_a.id, 3)), format="json"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["customer"]["id"] == str(customer.id)
        assert data["total_amount"] == "15.00"
        assert len(data["items"]) == 1
        item = data["items"][0]
        assert item["product_id"] == str(product_a.id)
        assert item["quantity"] == 3
        assert item["unit_price"] == "5.00"

    def test_decrements_stock(self, api_client, customer, product_a, product_b):
        response = api_client.post(
            URL,
            _payload(customer.id, (product_a.id, 3), (product_b.id, 3)),
            format="json",
        )

        assert response.status_code == 201
        product_a.refresh_from_db()
        product_b.refresh_from_db()
        assert product_a.quantity == 7
        assert product_b.quantity == 0

    def test_price_change_does_not_affect_order(
        self, api_client, customer, product_a
    ):
        response = api_client.post(
            URL, _payload(customer.id, (product_a.id, 1)), format="json"
        )
        Product.objects.filter(id=product_a.id).update(price=Decimal("99.00"))

        order = Order.objects.get(id=response.json()["id"])
        assert order.items.get().unit_price == Decimal("5.00")


class TestPlaceOrderValidation:
    def test_missing_items(self, api_client, customer):
        response = api_client.post(
            URL, {"customer_id": str(customer.id), "items": []}, format="json"
        )
        assert response.status_code == 400

    def test_zero_quantity(self, api_client, customer, product_a):
        response = api_client.post(
            URL, _payload(customer.id, (product_a.id, 0)), format="json"
        )
        assert response.status_code == 400

    def test_malformed_customer_id(self, api_client, product_a):
        response = api_client.post(
            URL, _payload("abc", (product_a.id, 1)), format="json"
        )
        assert response.status_code == 400


class TestPlaceOrderFailures:
    def test_unknown_customer(self, api_client, product_a):
        response = api_client.post(
            URL, _payload(uuid4(), (product_a.id, 1)), format="json"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Customer does not exist."

    def test_no_products_found(self, api_client, customer):
        response = api_client.post(
            URL, _payload(customer.id, (uuid4(), 1)), format="json"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "No products were found."

    def test_some_products_missing(self, api_client, customer, product_a):
        missing = uuid4()
        response = api_client.post(
            URL, _payload(customer.id, (product_a.id, 1), (missing, 1)), format="json"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == (
            f"The following products were not found [{missing}]"
        )

    def test_sold_out(self, api_client, customer, product_a, sold_out):
        response = api_client.post(
            URL, _payload(customer.id, (product_a.id, 1), (sold_out.id, 1)), format="json"
        )
        assert response.status_code == 409
        assert str(sold_out.id) in response.json()["detail"]

    def test_insufficient_stock(self, api_client, customer, product_b):
        response = api_client.post(
            URL, _payload(customer.id, (product_b.id, 4)), format="json"
        )
        assert response.status_code == 409
        assert f"{product_b.id}: 3" in response.json()["detail"]

    def test_failure_leaves_no_order_and_stock_untouched(
        self, api_client, customer, product_a, product_b
    ):
        api_client.post(
            URL,
            _payload(customer.id, (product_a.id, 1), (product_b.id, 4)),
            format="json",
        )

        assert Order.objects.count() == 0
        product_a.refresh_from_db()
        assert product_a.quantity == 10


# ===========================================================================
# Retrieve
# ===========================================================================


class TestRetrieveOrder:
    def test_retrieve_created_order(self, api_client, customer, product_a):
        created = api_client.post(
            URL, _payload(customer.id, (product_a.id, 2)), format="json"
        ).json()

        response = api_client.get(f"{URL}{created['id']}/")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["items"][0]["quantity"] == 2

    def test_unknown_order(self, api_client):
        response = api_client.get(f"{URL}{uuid4()}/")
        assert response.status_code == 404

    def test_malformed_order_id(self, api_client):
        response = api_client.get(f"{URL}not-a-uuid/")
        assert response.status_code == 404
