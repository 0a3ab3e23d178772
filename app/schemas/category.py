"""Category schemas"""
from pydantic import Field

from .base import BaseSchema


class CategoryResponse(BaseSchema):
    """Schema for GET /products/categories items"""
    slug: str = Field(..., min_length=1)
    name: str
    url: str
