"""
共通ユーティリティ
"""

from .iso8601 import (
    to_js_iso_string,
    parse_iso8601,
    is_iso8601_roundtrip,
)

__all__ = [
    "to_js_iso_string",
    "parse_iso8601",
    "is_iso8601_roundtrip",
]
