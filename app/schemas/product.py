"""Product schemas"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from app.utils.iso8601 import is_iso8601_roundtrip

from .base import BaseSchema


class ProductBase(BaseSchema):
    """Base product schema"""
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None


class ProductCreate(ProductBase):
    """Schema for POST /products/add

    DummyJSONは必須項目の欠けたボディも受け付けるため、全項目を任意にしている
    """

    def to_payload(self) -> dict:
        """送信用のJSONボディ（未設定の項目は送らない）"""
        return self.model_dump(exclude_none=True)


class ProductUpdate(ProductBase):
    """Schema for PUT / PATCH /products/{id}"""

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class ProductResponse(ProductBase):
    """Schema for a single product"""
    id: int


class ProductPage(BaseSchema):
    """Schema for a paged product list (PagedResult)"""
    products: List[ProductResponse]
    total: int = Field(..., ge=0)
    skip: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)


class DeletedProductResponse(ProductResponse):
    """Schema for DELETE /products/{id}"""
    is_deleted: bool = Field(..., alias="isDeleted")
    deleted_on: str = Field(..., alias="deletedOn")

    @field_validator("deleted_on", mode="after")
    def check_deleted_on(cls, v):
        """削除日時がISO-8601として往復変換できることを確認"""
        if not is_iso8601_roundtrip(v):
            raise ValueError(f"deletedOn is not a valid ISO-8601 string: {v!r}")
        return v
