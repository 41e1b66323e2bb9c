"""
Dependencies for dependency injection in routes.
"""
from bookcatalog.dependencies.auth import get_current_identity, CurrentIdentity

__all__ = [
    "get_current_identity",
    "CurrentIdentity",
]
