"""Tests for application assembly."""

import pytest

from prep.config import Settings
from prep.interface.api.app import LOCAL_FRONTEND, cors_origins
from tests.harness import create_client_fixture

api = create_client_fixture()


class TestCorsOrigins:
    def test_development_origin_listed_once(self):
        settings = Settings(environment="development", frontend_host="localhost")

        assert cors_origins(settings) == [LOCAL_FRONTEND]

    def test_production_frontend_first(self):
        settings = Settings(environment="production", frontend_host="prep.example.com")

        assert cors_origins(settings) == ["https://prep.example.com", LOCAL_FRONTEND]


class TestPreflight:
    @pytest.mark.asyncio
    async def test_frontend_may_send_credentials(self, api):
        client, _ = api

        response = await client.options(
            "/api/auth/sync-user",
            headers={
                "Origin": LOCAL_FRONTEND,
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == LOCAL_FRONTEND
        assert response.headers["access-control-allow-credentials"] == "true"
