"""
Pydantic schemas for product endpoints.

Wire names are camelCase (`productName`, `productID`); attributes are
snake_case with aliases.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductRequest(BaseModel):
    """
    Body of POST /products and PUT /products/{id}: every field is required.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(..., alias="productName", min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)


class ProductPatch(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    product_name: str | None = Field(default=None, alias="productName", min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    quantity: int | None = Field(default=None, ge=0)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productID")
    product_name: str = Field(..., alias="productName")
    description: str
    quantity: int
    price: float


class ProductCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    product_id: int = Field(..., alias="productID")
