"""
Product business logic.

Store failures become 500 with an operation-specific message; missing rows
become 404.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status
from pydantic import ValidationError

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND = "Product not found"


def _store_failure(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


async def list_products() -> list[schemas.Product]:
    try:
        rows = await repository.list_products()
    except db.StoreError as exc:
        logger.exception("list_products_failed")
        raise _store_failure("Failed to retrieve products") from exc
    return [schemas.Product.model_validate(row) for row in rows]


async def create_product(payload: schemas.ProductRequest) -> schemas.ProductCreatedResponse:
    try:
        row = await repository.create_product(
            product_name=payload.product_name,
            description=payload.description,
            quantity=payload.quantity,
            price=payload.price,
        )
    except db.StoreError as exc:
        logger.exception("create_product_failed")
        raise _store_failure("Failed to add product") from exc

    logger.info("product_created product_id=%s", row["productID"])
    return schemas.ProductCreatedResponse(
        message="Product added successfully",
        product_id=int(row["productID"]),
    )


async def replace_product(product_id: int, payload: schemas.ProductRequest) -> None:
    if not repository.product_id_in_range(product_id):
        raise _not_found()
    try:
        found = await repository.replace_product(
            product_id,
            product_name=payload.product_name,
            description=payload.description,
            quantity=payload.quantity,
            price=payload.price,
        )
    except db.StoreError as exc:
        logger.exception("replace_product_failed product_id=%s", product_id)
        raise _store_failure("Failed to update product") from exc
    if not found:
        raise _not_found()


def _validate_patch(fields: dict[str, Any]) -> dict[str, Any]:
    if not fields:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one field must be provided for update",
        )

    try:
        patch = schemas.ProductPatch.model_validate(fields)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=problems) from exc

    values = patch.model_dump(by_alias=True, exclude_unset=True)
    nulls = sorted(name for name, value in values.items() if value is None)
    if nulls:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Field(s) cannot be null: {', '.join(nulls)}",
        )
    return values


async def patch_product(product_id: int, fields: dict[str, Any]) -> None:
    values = _validate_patch(fields)
    if not repository.product_id_in_range(product_id):
        raise _not_found()
    try:
        found = await repository.update_product_fields(product_id, values)
    except (repository.EmptyUpdate, repository.UnknownField) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except db.StoreError as exc:
        logger.exception("patch_product_failed product_id=%s fields=%s", product_id, sorted(values))
        raise _store_failure("Failed to update product") from exc
    if not found:
        raise _not_found()


async def delete_product(product_id: int) -> None:
    if not repository.product_id_in_range(product_id):
        raise _not_found()
    try:
        found = await repository.delete_product(product_id)
    except db.StoreError as exc:
        logger.exception("delete_product_failed product_id=%s", product_id)
        raise _store_failure("Failed to delete product") from exc
    if not found:
        raise _not_found()
    logger.info("product_deleted product_id=%s", product_id)
