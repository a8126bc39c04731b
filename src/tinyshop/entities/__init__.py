"""Entities organized by business concept rather than technical layer.

Each entity has its own package containing:
- entity.py: Domain model exchanged over the API
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
]
