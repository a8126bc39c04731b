"""Product API router with CRUD operations.

Registered under ``/api/Product``:

- GET    /            all products
- GET    /{id}        one product, 404 if absent
- POST   /            create, 201 with a Location header
- PUT    /{id}        full overwrite, 204 or 404
- DELETE /{id}        delete, 204 or 404
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from tinyshop.api.http.deps import get_product_repository
from tinyshop.entities.service.product import Product, ProductRepository

router = APIRouter(prefix="/api/Product", tags=["products"])

# Route ids bind as 32-bit integers; anything wider is a 422
ProductId = Annotated[int, Path(ge=-(2**31), le=2**31 - 1)]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Product not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


@router.get("", response_model=list[Product], include_in_schema=False)
@router.get("/", response_model=list[Product], name="get_all_products")
def get_all_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    """List all products."""
    return repository.list_all()


@router.get(
    "/{product_id}",
    response_model=Product,
    name="get_product_by_id",
    responses=_NOT_FOUND,
)
def get_product_by_id(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Get a product by ID."""
    product = repository.get(product_id)
    if product is None:
        raise _not_found()
    return product


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "/",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    name="create_product",
)
def create_product(
    product: Product,
    request: Request,
    response: Response,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Create a new product. The store assigns the id."""
    created_product = repository.create(product)
    response.headers["Location"] = str(
        request.url_for("get_product_by_id", product_id=created_product.id)
    )
    return created_product


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    name="update_product",
    responses=_NOT_FOUND,
)
def update_product(
    product_id: ProductId,
    product_update: Product,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Overwrite a product's fields. The id in the body is ignored."""
    if repository.update(product_id, product_update) is None:
        raise _not_found()
    repository.save_changes()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    name="delete_product",
    responses=_NOT_FOUND,
)
def delete_product(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Delete a product."""
    if not repository.remove(product_id):
        raise _not_found()
    repository.save_changes()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
