"""
Product persistence (raw SQL).

API field names are mapped to column identifiers through `UPDATABLE_COLUMNS`;
caller-supplied keys never reach the SQL text.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from core import db

# products.product_id is SERIAL (int4); larger ids cannot exist and asyncpg refuses to encode them.
MAX_PRODUCT_ID = 2**31 - 1

UPDATABLE_COLUMNS: dict[str, str] = {
    "productName": "product_name",
    "description": "description",
    "quantity": "quantity",
    "price": "price",
}

_PRODUCT_COLUMNS = """
    product_id AS "productID",
    product_name AS "productName",
    description,
    quantity,
    price
"""


def product_id_in_range(product_id: int) -> bool:
    return 0 < product_id <= MAX_PRODUCT_ID


class EmptyUpdate(ValueError):
    pass


class UnknownField(ValueError):
    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Unknown field(s): {', '.join(fields)}")
        self.fields = fields


def build_partial_update(fields: Mapping[str, Any], product_id: int) -> tuple[str, list[Any]]:
    """
    Build `UPDATE products SET ... WHERE product_id = $n` for the given fields.

    Returns the statement and its positional args (values first, id last).
    """
    if not fields:
        raise EmptyUpdate("At least one field must be provided for update")

    unknown = [name for name in fields if name not in UPDATABLE_COLUMNS]
    if unknown:
        raise UnknownField(unknown)

    assignments: list[str] = []
    args: list[Any] = []
    for position, (name, value) in enumerate(fields.items(), start=1):
        assignments.append(f"{UPDATABLE_COLUMNS[name]} = ${position}")
        args.append(value)
    args.append(product_id)

    sql = (
        f"UPDATE products SET {', '.join(assignments)} "
        f"WHERE product_id = ${len(args)} RETURNING product_id"
    )
    return sql, args


async def list_products() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_PRODUCT_COLUMNS}
        FROM products
        ORDER BY product_id
        """
    )


async def create_product(
    *,
    product_name: str,
    description: str,
    quantity: int,
    price: Decimal,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO products (product_name, description, quantity, price)
        VALUES ($1, $2, $3, $4)
        RETURNING {_PRODUCT_COLUMNS}
        """,
        product_name,
        description,
        quantity,
        price,
    )
    if row is None:
        raise db.StoreError("Failed to insert product.")
    return row


async def replace_product(
    product_id: int,
    *,
    product_name: str,
    description: str,
    quantity: int,
    price: Decimal,
) -> bool:
    row = await db.fetch_one(
        """
        UPDATE products
        SET product_name = $1,
            description = $2,
            quantity = $3,
            price = $4
        WHERE product_id = $5
        RETURNING product_id
        """,
        product_name,
        description,
        quantity,
        price,
        product_id,
    )
    return row is not None


async def update_product_fields(product_id: int, fields: Mapping[str, Any]) -> bool:
    sql, args = build_partial_update(fields, product_id)
    row = await db.fetch_one(sql, *args)
    return row is not None


async def delete_product(product_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM products
        WHERE product_id = $1
        RETURNING product_id
        """,
        product_id,
    )
    return row is not None
