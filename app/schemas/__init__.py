"""
Pydantic Schemas for the DummyJSON products resource
"""

from .base import BaseSchema
from .category import CategoryResponse
from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductPage,
    DeletedProductResponse,
)

__all__ = [
    "BaseSchema",
    "CategoryResponse",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductPage",
    "DeletedProductResponse",
]
