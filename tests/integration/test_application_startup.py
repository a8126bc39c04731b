"""Integration tests for application lifecycle and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from tinyshop.core.services import DbSessionService
from tinyshop.runtime.config.config_data import ConfigData, DatabaseConfig
from tinyshop.runtime.context import with_context


class TestApplicationStartup:
    """Test application startup and shutdown hooks."""

    @pytest.mark.asyncio
    async def test_startup_creates_dependencies_and_tables(self):
        import tinyshop.api.http.app as application

        test_config = ConfigData(database=DatabaseConfig(url="sqlite:///:memory:"))

        with with_context(config_override=test_config):
            await application.startup()

        try:
            deps = application.app.state.app_dependencies
            assert deps.database_service.health_check() is True

            from tinyshop.entities.service.product import Product, ProductRepository

            with deps.database_service.session_scope() as session:
                created = ProductRepository(session).create(Product(name="Tent"))
            assert created.id > 0
        finally:
            await application.shutdown()
            del application.app.state.app_dependencies

    @pytest.mark.asyncio
    async def test_startup_can_skip_table_creation(self):
        import tinyshop.api.http.app as application

        test_config = ConfigData(
            database=DatabaseConfig(url="sqlite:///:memory:", create_tables=False)
        )

        with with_context(config_override=test_config):
            await application.startup()

        try:
            from sqlalchemy import inspect

            engine = application.app.state.app_dependencies.database_service.engine
            assert inspect(engine).get_table_names() == []
        finally:
            await application.shutdown()
            del application.app.state.app_dependencies


class TestHealthEndpoints:
    def test_health(self):
        from tinyshop.api.http.app import app

        response = TestClient(app).get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "api"}

    def test_ready_without_dependencies(self):
        from tinyshop.api.http.app import app

        response = TestClient(app).get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_ready_with_database(self, engine):
        from tinyshop.api.http.app import app
        from tinyshop.api.http.app_data import ApplicationDependencies

        app.state.app_dependencies = ApplicationDependencies(
            database_service=DbSessionService(engine=engine)
        )
        try:
            response = TestClient(app).get("/health/ready")
        finally:
            del app.state.app_dependencies

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"
