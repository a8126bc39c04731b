"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from tinyshop.api.http.app_data import ApplicationDependencies
from tinyshop.core.services import DbSessionService
from tinyshop.entities.service.product import ProductRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open one session per request and close it once the response is sent."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(db: Session = Depends(get_db_session)) -> ProductRepository:
    return ProductRepository(db)
