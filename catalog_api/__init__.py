"""Catalog API.

Paginated catalog queries and CRUD over items, brands and types.
"""
