"""
Products resource: CRUD over the `products` table.
"""
