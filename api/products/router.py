"""
Product CRUD endpoints. Every route requires a bearer token.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/products")
async def list_products() -> list[schemas.Product]:
    return await service.list_products()


@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_product(request: schemas.ProductRequest) -> schemas.ProductCreatedResponse:
    return await service.create_product(request)


@router.put("/products/{product_id}", response_class=PlainTextResponse)
async def replace_product(product_id: int, request: schemas.ProductRequest) -> str:
    await service.replace_product(product_id, request)
    return "Product updated successfully"


@router.patch("/products/{product_id}", response_class=PlainTextResponse)
async def patch_product(product_id: int, fields: dict[str, Any] = Body(...)) -> str:
    await service.patch_product(product_id, fields)
    return "Product updated successfully (partial)"


@router.delete("/products/{product_id}", response_class=PlainTextResponse)
async def delete_product(product_id: int) -> str:
    await service.delete_product(product_id)
    return "Product deleted successfully"
