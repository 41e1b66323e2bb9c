"""
Collection names in the catalog database.
"""


class Collections:
    """Collection names in the catalog database."""
    USERS = "users"
    BOOKS = "books"
