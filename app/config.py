"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "DummyJSON Products Contract"
    VERSION: str = "0.1.0"

    # remote API
    DUMMYJSON_BASE_URL: str = "https://dummyjson.com"
    REQUEST_TIMEOUT: float = 10.0

    # True のときだけ、接続できない場合にliveテストをスキップする
    SKIP_LIVE_WHEN_UNREACHABLE: bool = False

    # pagination
    PAGE_SIZE: int = 30

    # 0 = 契約テストでは最初のレスポンスをそのまま検証する
    MAX_RETRIES: int = 0

    # logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )


settings = Settings()
