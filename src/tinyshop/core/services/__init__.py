"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Catalog client
from .product_client_service import ProductService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ProductService",
]
