"""Unit tests for CustomerService.

Covers:
- create: happy path, duplicate email.
- update: happy path, not found, email collision, unchanged email.
- delete: happy path, not found, pending payments block.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from portal.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from portal.customers.exceptions import (
    CustomerEmailInUse,
    CustomerHasActivePayments,
    CustomerNotFound,
)
from portal.customers.models import Customer
from portal.customers.services import CustomerService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda c: c
    return repo


@pytest.fixture()
def mock_payments():
    payments = MagicMock()
    payments.count_pending_for_customer.return_value = 0
    return payments


@pytest.fixture()
def service(mock_repo, mock_payments):
    return CustomerService(repository=mock_repo, payments=mock_payments)


def _make_customer(**overrides) -> Customer:
    defaults = {
        "customer_id": uuid.uuid4(),
        "name": "María López",
        "email": "maria@example.com",
        "phone": "5512345678",
        "address": "Av. Reforma 100",
    }
    defaults.update(overrides)
    return Customer(**defaults)


def _create_dto(**overrides) -> CreateCustomerDTO:
    data = {
        "name": "María López",
        "email": "maria@example.com",
        "phone": "55 1234-5678",
        "address": "Av. Reforma 100",
    }
    data.update(overrides)
    return CreateCustomerDTO.from_payload(data).value


# ===========================================================================
# create
# ===========================================================================


class TestCreateCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_email.return_value = None

        customer = service.create(_create_dto())

        assert customer.name == "María López"
        assert customer.phone == "5512345678"
        assert customer.active is True
        mock_repo.save.assert_called_once()

    def test_explicit_inactive(self, service, mock_repo):
        mock_repo.get_by_email.return_value = None

        customer = service.create(_create_dto(active=False))

        assert customer.active is False

    def test_duplicate_email_raises(self, service, mock_repo):
        mock_repo.get_by_email.return_value = _make_customer()

        with pytest.raises(CustomerEmailInUse, match="El email ya está en uso"):
            service.create(_create_dto())

        mock_repo.save.assert_not_called()

    def test_unique_index_violation_raises_conflict(self, service, mock_repo):
        mock_repo.get_by_email.return_value = None
        mock_repo.save.side_effect = IntegrityError("UNIQUE constraint failed: customer.email")

        with pytest.raises(CustomerEmailInUse):
            service.create(_create_dto())


# ===========================================================================
# update
# ===========================================================================


class TestUpdateCustomer:
    def test_success(self, service, mock_repo):
        existing = _make_customer()
        mock_repo.get_by_id.return_value = existing

        dto = UpdateCustomerDTO.from_payload({"name": "María Actualizada"}).value
        customer = service.update(str(existing.pk), dto)

        assert customer.name == "María Actualizada"
        assert customer.email == "maria@example.com"
        mock_repo.save.assert_called_once()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        dto = UpdateCustomerDTO.from_payload({"name": "Nadie"}).value
        with pytest.raises(CustomerNotFound):
            service.update(str(uuid.uuid4()), dto)

    def test_email_collision_raises(self, service, mock_repo):
        existing = _make_customer()
        other = _make_customer(email="taken@example.com")
        mock_repo.get_by_id.return_value = existing
        mock_repo.get_by_email.return_value = other

        dto = UpdateCustomerDTO.from_payload({"email": "taken@example.com"}).value
        with pytest.raises(CustomerEmailInUse):
            service.update(str(existing.pk), dto)

        mock_repo.save.assert_not_called()

    def test_same_email_not_rejected(self, service, mock_repo):
        existing = _make_customer()
        mock_repo.get_by_id.return_value = existing

        dto = UpdateCustomerDTO.from_payload({"email": "MARIA@example.com"}).value
        service.update(str(existing.pk), dto)

        mock_repo.get_by_email.assert_not_called()
        mock_repo.save.assert_called_once()


# ===========================================================================
# delete / get
# ===========================================================================


class TestDeleteCustomer:
    def test_success(self, service, mock_repo, mock_payments):
        existing = _make_customer()
        mock_repo.get_by_id.return_value = existing

        service.delete(str(existing.pk))

        mock_payments.count_pending_for_customer.assert_called_once_with(existing.pk)
        mock_repo.delete.assert_called_once_with(existing.pk)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.delete(str(uuid.uuid4()))

        mock_repo.delete.assert_not_called()

    def test_pending_payments_block_delete(self, service, mock_repo, mock_payments):
        mock_repo.get_by_id.return_value = _make_customer()
        mock_payments.count_pending_for_customer.return_value = 2

        with pytest.raises(CustomerHasActivePayments):
            service.delete(str(uuid.uuid4()))

        mock_repo.delete.assert_not_called()


class TestGetCustomer:
    def test_returns_entity(self, service, mock_repo):
        existing = _make_customer()
        mock_repo.get_by_id.return_value = existing

        assert service.get(str(existing.pk)) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.get(str(uuid.uuid4()))
