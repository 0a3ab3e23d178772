"""
ISO-8601日時文字列ユーティリティ

DummyJSONが返す日時（deletedOn など）は JavaScript の toISOString と同じ
`YYYY-MM-DDTHH:MM:SS.mmmZ` 形式
"""

from datetime import datetime, timezone
from typing import Any


def to_js_iso_string(value: datetime) -> str:
    """
    datetimeをUTCの `YYYY-MM-DDTHH:MM:SS.mmmZ` 形式に変換

    年は4桁ゼロ埋め、ミリ秒精度
    naiveなdatetimeはUTCとみなす
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso8601(value: str) -> datetime:
    """
    ISO-8601文字列をdatetimeに変換（末尾のZにも対応）

    Raises:
        ValueError: 解析できない場合
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def is_iso8601_roundtrip(value: Any) -> bool:
    """
    日時文字列を解析して再シリアライズした結果が元の文字列と完全一致するか

    文字列以外・解析できない文字列はFalse
    """
    if not isinstance(value, str):
        return False
    try:
        parsed = parse_iso8601(value)
    except ValueError:
        return False
    return to_js_iso_string(parsed) == value
