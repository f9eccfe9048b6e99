"""Product Schemas — Pydantic models for documented request and response shapes.

Invariants:
    - Responses wrap payloads in {"data": ...}; errors use {"error": ...} or {"errors": [...]}
    - ProductResponse reads ORM rows directly (from_attributes)
    - ProductCreate/ProductUpdate only document request bodies; field rules run
      in core/validation.py so every failed rule is reported

Design Decisions:
    - request_body() inlines a model's JSON schema into openapi_extra so /docs
      shows the body even though routes read raw JSON
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    """Product as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="The product ID", examples=[1])
    name: str = Field(description="The product name", examples=["Phone case"])
    price: float = Field(description="The product price", examples=[300])
    availability: bool = Field(
        description="The product availability", examples=[True],
    )


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["Product deleted"])


class ProductCreate(BaseModel):
    """Body accepted by POST /api/products."""
    name: str = Field(min_length=1, examples=["PC ATX case"])
    price: float = Field(gt=0, examples=[99])


class ProductUpdate(ProductCreate):
    """Body accepted by PUT /api/products/{id}."""
    availability: bool = Field(examples=[True])


class FieldError(BaseModel):
    """One failed field rule."""
    type: Literal["field"] = "field"
    value: Any = None
    msg: str
    path: str
    location: Literal["params", "body"]


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    error: str = Field(examples=["Product not found"])


def request_body(model: type[BaseModel]) -> dict[str, Any]:
    """openapi_extra fragment documenting a required JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": model.model_json_schema()},
            },
        },
    }
