"""
Table bootstrap.

`username` is UNIQUE so signup races are settled by the database, not by a
prior existence check.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    user_id   SERIAL PRIMARY KEY,
    username  TEXT NOT NULL UNIQUE,
    password  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS products (
    product_id    SERIAL PRIMARY KEY,
    product_name  TEXT NOT NULL,
    description   TEXT NOT NULL,
    quantity      INTEGER NOT NULL,
    price         NUMERIC(12, 2) NOT NULL
);
"""


async def create_tables() -> None:
    await db.execute(SCHEMA_SQL)
    logger.info("db_schema_ensured")
