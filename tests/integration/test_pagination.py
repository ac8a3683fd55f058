"""Integration tests for standardized pagination and ordering."""

from __future__ import annotations

import pytest

from portal.customers.models import Customer

pytestmark = pytest.mark.integration


@pytest.fixture()
def customer_batch():
    Customer.objects.bulk_create(
        Customer(
            name=f"Cliente {idx:03d}",
            email=f"cliente{idx:03d}@example.com",
            phone="5512345678",
            address="CDMX",
        )
        for idx in range(1, 46)
    )


class TestPagination:
    def test_default_page_size(self, api_client, customer_batch):
        response = api_client.get("/api/customers")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 45
        assert len(data["results"]) == 20
        assert data["next"] is not None
        assert data["previous"] is None

    def test_last_page(self, api_client, customer_batch):
        data = api_client.get("/api/customers", {"page": 3}).json()
        assert len(data["results"]) == 5
        assert data["next"] is None

    def test_ordering_by_name(self, api_client, customer_batch):
        data = api_client.get("/api/customers", {"ordering": "name"}).json()
        assert data["results"][0]["name"] == "Cliente 001"

    def test_name_search(self, api_client, customer_batch):
        data = api_client.get("/api/customers", {"name": "042"}).json()
        assert [c["email"] for c in data["results"]] == ["cliente042@example.com"]
