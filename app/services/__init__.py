"""
外部API連携サービス
"""

from .dummyjson_api import (
    ProductsAPI,
    APIError,
)
from .contract_checks import (
    is_sorted,
    has_only_fields,
)

__all__ = [
    "ProductsAPI",
    "APIError",
    "is_sorted",
    "has_only_fields",
]
