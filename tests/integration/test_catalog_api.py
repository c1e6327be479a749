"""Integration tests for the customer and product registration endpoints."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestCustomerAPI:
    def test_create_customer(self, api_client):
        response = api_client.post(
            "/api/v1/customers/",
            {"name": "Alice", "email": "Alice@Example.com"},
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "alice@example.com"
        assert Customer.objects.filter(id=data["id"]).exists()

    def test_duplicate_email(self, api_client):
        Customer.objects.create(name="Alice", email="alice@example.com")

        response = api_client.post(
            "/api/v1/customers/",
            {"name": "Other", "email": "alice@example.com"},
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "This e-mail is already assigned."

    def test_invalid_email(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", {"name": "Bad", "email": "nope"}, format="json"
        )
        assert response.status_code == 400


class TestProductAPI:
    def test_create_product(self, api_client):
        response = api_client.post(
            "/api/v1/products/",
            {"name": "Widget", "price": "5.00", "quantity": 10},
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["price"] == "5.00"
        assert data["quantity"] == 10
        assert Product.objects.get(id=data["id"]).name == "Widget"

    def test_create_product_logs_single_created_event(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/api/v1/products/",
                {"name": "Logged", "price": "1.00", "quantity": 1},
                format="json",
            )

        messages = [record.getMessage() for record in caplog.records]
        assert any("product.created" in m for m in messages)
        assert not any("product_created" in m for m in messages)

    def test_duplicate_name(self, api_client):
        Product.objects.create(name="Widget", price=Decimal("1.00"), quantity=1)

        response = api_client.post(
            "/api/v1/products/",
            {"name": "Widget", "price": "2.00", "quantity": 1},
            format="json",
        )

        assert response.status_code == 409

    def test_negative_quantity(self, api_client):
        response = api_client.post(
            "/api/v1/products/",
            {"name": "Widget", "price": "2.00", "quantity": -1},
            format="json",
        )
        assert response.status_code == 400


class TestSchema:
    def test_openapi_schema_served(self, api_client):
        response = api_client.get("/api/schema/")
        assert response.status_code == 200
