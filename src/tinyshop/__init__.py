"""TinyShop product catalog.

This package contains the catalog API (FastAPI + SQLModel), the typed HTTP
client used to consume it, and the supporting runtime configuration.
"""

__version__ = "0.1.0"
