"""
契約テスト用の判定ヘルパー

DummyJSONのレスポンスに対して繰り返し行うチェック:
- 並び順（sortBy / order）
- フィールド射影（select）

日時文字列のISO-8601往復変換は app.utils.iso8601
"""

from typing import Any, Iterable, Mapping, Sequence


def is_sorted(values: Sequence[Any], descending: bool = False) -> bool:
    """
    値の並びが自身のソート済みコピーと一致するか

    Parameters:
        values: 数値などの比較可能な値の並び
        descending: Trueなら降順として判定

    Returns:
        並びがソート済みならTrue
    """
    values = list(values)
    return values == sorted(values, reverse=descending)


def has_only_fields(
    item: Mapping[str, Any],
    fields: Iterable[str],
    optional: Iterable[str] = ("id",),
) -> bool:
    """
    selectで指定したフィールドだけを持つか

    指定フィールドはすべて必須、optionalに含まれるもの（既定ではid）は
    あってもなくてもよい
    """
    required = set(fields)
    allowed = required | set(optional)
    keys = set(item.keys())
    return required <= keys and keys <= allowed
