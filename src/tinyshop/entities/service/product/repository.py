"""Product repository for data access operations."""

from loguru import logger
from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable

_MUTABLE_FIELDS = ("name", "description", "price", "image_url")


class ProductRepository:
    """Persistence context for products.

    Wraps a single session. Mutations are staged on the session and only reach
    the store when :meth:`save_changes` commits them.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: int) -> Product | None:
        """Point lookup by primary key."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Product]:
        """Return every stored product in id order."""
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def add(self, product: Product) -> ProductTable:
        """Stage a new row. Any id on ``product`` is discarded."""
        row = ProductTable.model_validate(product.model_dump(exclude={"id"}))
        self._session.add(row)
        return row

    def update(self, product_id: int, product: Product) -> Product | None:
        """Overwrite every mutable field of an existing row in place.

        The row keeps ``product_id``; ``product.id`` is ignored.
        """
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None

        for field in _MUTABLE_FIELDS:
            setattr(row, field, getattr(product, field))
        self._session.add(row)
        return Product.model_validate(row, from_attributes=True)

    def remove(self, product_id: int) -> bool:
        """Stage deletion of an existing row. Returns False when absent."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        return True

    def save_changes(self) -> None:
        """Commit all staged mutations as one unit."""
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            logger.exception("Failed to save product changes")
            raise

    def create(self, product: Product) -> Product:
        """Insert a product and return it with its store-assigned id."""
        row = self.add(product)
        self.save_changes()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)
