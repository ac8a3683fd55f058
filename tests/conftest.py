from decimal import Decimal

import pytest
from django.utils import timezone

from rest_framework.test import APIClient

from portal.customers.models import Customer
from portal.payments.models import Payment
from portal.products.models import Product
from portal.sessions.models import Session

VALID_ID = "583e2f58-e0b6-4fd2-adb1-c6b948fe32ad"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Persisted records
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer():
    return Customer.objects.create(
        name="María López",
        email="maria@example.com",
        phone="5512345678",
        address="Av. Reforma 100, CDMX",
    )


@pytest.fixture()
def product(customer):
    return Product.objects.create(
        customer=customer,
        name="Plan Básico",
        description="Hosting compartido",
    )


@pytest.fixture()
def payment(customer, product):
    return Payment.objects.create(
        customer=customer,
        product=product,
        amount=Decimal("199.90"),
        currency="MXN",
        method="card",
    )


@pytest.fixture()
def session(customer):
    return Session.objects.create(
        customer=customer,
        user_agent="Mozilla/5.0",
        ip_address="10.0.0.1",
        started_at=timezone.now(),
    )
