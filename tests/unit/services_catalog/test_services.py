from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest

from portal.core.exceptions import ReferenceNotFound
from portal.services_catalog.dtos import CreateServiceDTO, UpdateServiceDTO
from portal.services_catalog.exceptions import ServiceNotFound
from portal.services_catalog.models import Service
from portal.services_catalog.services import ServiceCatalogService

pytestmark = pytest.mark.unit


@pytest.fixture()
def repos():
    repo, customers = MagicMock(), MagicMock()
    repo.save.side_effect = lambda s: s
    customers.exists.return_value = True
    return repo, customers


@pytest.fixture()
def service(repos):
    repo, customers = repos
    return ServiceCatalogService(repository=repo, customers=customers)


class TestServiceDTOs:
    def test_missing_customer_id_and_description(self):
        result = CreateServiceDTO.from_payload({"name": "Consultoría"})
        assert {(e.field, e.reason) for e in result.errors} == {
            ("customer_id", "required"),
            ("description", "required"),
        }

    def test_description_bound(self):
        result = CreateServiceDTO.from_payload(
            {
                "customer_id": str(uuid.uuid4()),
                "name": "Consultoría",
                "description": "x" * 256,
            }
        )
        assert result.errors[0].as_dict() == {
            "field": "description",
            "reason": "max_length",
            "limit": 255,
        }

    def test_update_shape_fully_optional(self):
        assert UpdateServiceDTO.from_payload({}).is_valid


class TestServiceCatalogService:
    def test_create(self, service):
        dto = CreateServiceDTO.from_payload(
            {
                "customer_id": str(uuid.uuid4()),
                "name": "Consultoría",
                "description": "Por hora",
                "active": False,
            }
        ).value

        created = service.create(dto)

        assert created.name == "Consultoría"
        assert created.active is False

    def test_create_unknown_customer(self, service, repos):
        repo, customers = repos
        customers.exists.return_value = False
        dto = CreateServiceDTO.from_payload(
            {"customer_id": str(uuid.uuid4()), "name": "x", "description": "y"}
        ).value

        with pytest.raises(ReferenceNotFound):
            service.create(dto)
        repo.save.assert_not_called()

    def test_update(self, service, repos):
        repo, _ = repos
        repo.get_by_id.return_value = Service(
            service_id=uuid.uuid4(),
            customer_id=uuid.uuid4(),
            name="Viejo",
            description="d",
        )

        dto = UpdateServiceDTO.from_payload({"name": "Nuevo"}).value
        assert service.update(str(uuid.uuid4()), dto).name == "Nuevo"

    def test_get_missing(self, service, repos):
        repo, _ = repos
        repo.get_by_id.return_value = None

        with pytest.raises(ServiceNotFound):
            service.get(str(uuid.uuid4()))
