"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/products/999999")
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"][0]["code"] == "not_found"
        assert "999999" in data["errors"][0]["detail"]

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_validation_error_has_standard_format(self, api_client):
        response = api_client.post("/products", {"name": "No price"}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert isinstance(data["errors"], list)
        attrs = [error["attr"] for error in data["errors"]]
        assert "price" in attrs
        for error in data["errors"]:
            assert "code" in error
            assert "detail" in error

    def test_method_not_allowed_has_standard_format(self, api_client):
        response = api_client.patch("/products/1", {"name": "x"}, format="json")
        assert response.status_code == 405
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "method_not_allowed"
