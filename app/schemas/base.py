"""Base schema"""
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """DummyJSONペイロード共通の基底スキーマ

    サービス側で定義された未知のフィールドも保持する
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")
