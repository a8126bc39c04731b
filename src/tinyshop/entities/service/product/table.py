"""Product database table model."""

from decimal import Decimal

from sqlalchemy import Column
from sqlmodel import Field

from tinyshop.entities.core._base import EntityTable, ExactNumeric


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "product"

    name: str | None = None
    description: str | None = None
    price: Decimal = Field(
        default=Decimal(0),
        sa_column=Column(ExactNumeric(18, 2), nullable=False),
    )
    image_url: str | None = None
