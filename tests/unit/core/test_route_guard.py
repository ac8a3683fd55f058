from unittest.mock import MagicMock

import pytest
from rest_framework.response import Response
from rest_framework.test import APIRequestFactory

from portal.core.middleware import id_param_guard, is_valid_id_param

pytestmark = pytest.mark.unit

VALID_ID = "583e2f58-e0b6-4fd2-adb1-c6b948fe32ad"


class _View:
    entity_name = "customer"


@pytest.fixture()
def request_():
    return APIRequestFactory().get("/api/customers/x")


class TestIsValidIdParam:
    def test_accepts_36_chars(self):
        assert is_valid_id_param(VALID_ID)

    @pytest.mark.parametrize("value", [None, "", "abc", VALID_ID[:-1], 12345])
    def test_rejects_short_or_missing(self, value):
        assert not is_valid_id_param(value)


class TestIdParamGuard:
    def test_passes_through_with_valid_id(self, request_):
        handler = MagicMock(return_value=Response({"ok": True}))
        guarded = id_param_guard()(handler)

        response = guarded(_View(), request_, id=VALID_ID)

        handler.assert_called_once()
        assert response.data == {"ok": True}

    @pytest.mark.parametrize("kwargs", [{"id": "abc"}, {}, {"id": None}])
    def test_short_circuits_invalid_id(self, request_, kwargs):
        handler = MagicMock()
        guarded = id_param_guard()(handler)

        response = guarded(_View(), request_, **kwargs)

        handler.assert_not_called()
        assert response.status_code == 400
        assert response.data == {"message": "Parámetro id inválido"}

    def test_custom_param_name(self, request_):
        handler = MagicMock()
        guarded = id_param_guard(entity_name="session", param_name="session_id")(
            handler
        )

        response = guarded(_View(), request_, session_id="short")

        handler.assert_not_called()
        assert response.data == {"message": "Parámetro session_id inválido"}
