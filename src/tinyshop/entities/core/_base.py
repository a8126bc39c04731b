from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier.

    Fields are exchanged over the wire in camelCase and accepted in either
    camelCase or snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int = PydanticField(
        default=0,
        description="Unique identifier, assigned by the store on creation",
    )


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )


class ExactNumeric(TypeDecorator):
    """``NUMERIC(precision, scale)`` that keeps every digit on SQLite as well.

    SQLite has no decimal storage class and SQLAlchemy's ``Numeric`` binds
    through ``float`` there, so on that dialect values are stored as their
    canonical decimal text. Values are rounded half away from zero to ``scale``
    places, and anything wider than the column raises ``ValueError``.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 18, scale: int = 2):
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale
        self._quantum = Decimal(1).scaleb(-scale)

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            # sign + digits + decimal point
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(
            Numeric(precision=self.precision, scale=self.scale, asdecimal=True)
        )

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        quantized = Decimal(value).quantize(self._quantum, rounding=ROUND_HALF_UP)
        if quantized.adjusted() >= self.precision - self.scale:
            raise ValueError(
                f"{value} does not fit NUMERIC({self.precision}, {self.scale})"
            )
        if dialect.name == "sqlite":
            return str(quantized)
        return quantized

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)
