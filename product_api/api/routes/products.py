"""Product Routes — the fixed verb/path table for /api/products.

Invariants:
    - Each route declares its rule chain as the first dependency; handlers only run
      on a clean request
    - The {id} segment arrives as a raw string; ID_RULES decides whether it is an integer
    - Success payloads are {"data": ...}; 404 is {"error": "Product not found"}

Design Decisions:
    - PATCH toggles the stored availability and ignores any request body
    - Collection routes answer on both /api/products and /api/products/
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from product_api.api.dependencies import get_product_repository, validate_request
from product_api.core.validation import (
    ID_RULES, PRODUCT_CREATE_RULES, PRODUCT_UPDATE_RULES,
    as_number, as_string, to_boolean,
)
from product_api.schemas.product import (
    ErrorResponse, MessageEnvelope, ProductCreate, ProductEnvelope,
    ProductListEnvelope, ProductResponse, ProductUpdate,
    ValidationErrorResponse, request_body,
)
from product_api.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["Products"])

_BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorResponse,
        "description": "Bad request - invalid ID or invalid input data",
    },
}
_NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "model": ErrorResponse, "description": "Product not found",
    },
}


@router.get(
    "", response_model=ProductListEnvelope,
    summary="Get a list of products",
)
@router.get("/", response_model=ProductListEnvelope, include_in_schema=False)
async def get_products(
    repo: ProductRepository = Depends(get_product_repository),
):
    """Return a list of products."""
    products = await repo.list_products()
    return ProductListEnvelope(
        data=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{id}", response_model=ProductEnvelope,
    summary="Get a product by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def get_product_by_id(
    id: str,
    _: dict[str, Any] = Depends(validate_request(ID_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Return a product based on its unique ID."""
    product = await repo.get_product(int(id))
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.post(
    "", response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    responses=_BAD_REQUEST,
    openapi_extra=request_body(ProductCreate),
)
@router.post(
    "/", response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_product(
    body: dict[str, Any] = Depends(validate_request(PRODUCT_CREATE_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Create a new record in the DB."""
    product = await repo.create_product(
        name=as_string(body["name"]), price=as_number(body["price"]),
    )
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.put(
    "/{id}", response_model=ProductEnvelope,
    summary="Update a product with user input",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    openapi_extra=request_body(ProductUpdate),
)
async def update_product(
    id: str,
    body: dict[str, Any] = Depends(validate_request(PRODUCT_UPDATE_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Overwrite name, price and availability; returns the updated product."""
    product = await repo.update_product(
        int(id),
        name=as_string(body["name"]),
        price=as_number(body["price"]),
        availability=to_boolean(body["availability"]),
    )
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.patch(
    "/{id}", response_model=ProductEnvelope,
    summary="Toggle a product's availability",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_availability(
    id: str,
    _: dict[str, Any] = Depends(validate_request(ID_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Flip the stored availability; returns the updated product."""
    product = await repo.toggle_availability(int(id))
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.delete(
    "/{id}", response_model=MessageEnvelope,
    summary="Delete a product by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_product(
    id: str,
    _: dict[str, Any] = Depends(validate_request(ID_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Remove the product; returns a confirmation message."""
    await repo.delete_product(int(id))
    return MessageEnvelope(data="Product deleted")
