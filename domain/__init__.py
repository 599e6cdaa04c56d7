"""
Domain layer - Business enums and schemas.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
