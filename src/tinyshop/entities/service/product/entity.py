"""Entity: Product."""

from decimal import Decimal

from pydantic import Field

from tinyshop.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    A plain data record: every field is optional on input and carries no
    validation beyond type binding. ``price`` is an exact ``Decimal`` and
    travels as a decimal string in JSON; numbers are accepted on input.
    """

    name: str | None = Field(default=None, description="Display name")
    description: str | None = Field(default=None, description="Free-form description")
    price: Decimal = Field(default=Decimal(0), description="Unit price, negatives allowed")
    image_url: str | None = Field(default=None, description="Image location")
