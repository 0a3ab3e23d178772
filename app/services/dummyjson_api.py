"""
DummyJSON products API連携サービス
商品リソースの契約テスト用クライアント

機能:
- 各エンドポイントの呼び出し（レスポンスをそのまま返す）
- ページ取得・全件取得（ページネーション）
"""

import logging
from typing import Optional, List, Dict, Any, Iterable, Union

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.config import settings
from app.schemas import ProductPage, ProductResponse

# ============================================
# ログ設定
# ============================================
logger = logging.getLogger(__name__)

# ============================================
# 設定
# ============================================
PRODUCTS_PATH = "/products"

# リトライ設定（MAX_RETRIES=0 のときは無効）
BACKOFF_FACTOR = 1  # 1秒, 2秒, 4秒...
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]


# ============================================
# カスタム例外
# ============================================
class APIError(Exception):
    """API関連のエラー"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# ============================================
# ユーティリティ関数
# ============================================
def _create_session_with_retry(max_retries: Optional[int] = None) -> requests.Session:
    """リトライ機能付きのセッションを作成"""
    if max_retries is None:
        max_retries = settings.MAX_RETRIES
    session = requests.Session()
    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _join_select(select: Union[str, Iterable[str], None]) -> Optional[str]:
    if select is None or isinstance(select, str):
        return select
    return ",".join(select)


# ============================================
# 商品API
# ============================================
class ProductsAPI:
    """DummyJSON /products のクライアント

    エンドポイントごとのメソッドは requests.Response をそのまま返す
    （404 などのステータスもテスト側で検証するため raise しない）。
    通信エラーのみ APIError に変換する。
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: APIのベースURL（既定は settings.DUMMYJSON_BASE_URL）
            timeout: 1リクエストあたりのタイムアウト（秒）
            session: 差し替え用のセッション（テスト用）
        """
        self.base_url = (base_url or settings.DUMMYJSON_BASE_URL).rstrip("/") + PRODUCTS_PATH
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session if session is not None else _create_session_with_retry()

    def __enter__(self) -> "ProductsAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _request(
        self,
        method: str,
        path: str = "",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            logger.info(f"API呼び出し開始: {method} {url} params={params}")
            response = self.session.request(
                method, url, params=params or None, json=json, timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.error(f"タイムアウトエラー: {method} {url}")
            raise APIError("APIリクエストがタイムアウトしました")
        except requests.exceptions.RequestException as e:
            logger.error(f"リクエストエラー: {method} {url} - {str(e)}")
            raise APIError(f"リクエストエラー: {str(e)}")

        logger.info(f"API呼び出し完了: {method} {url} -> {response.status_code}")
        return response

    # ---------- 参照系 ----------

    def list_products(
        self,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        select: Union[str, Iterable[str], None] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> requests.Response:
        """GET /products?limit=&skip=&select=&sortBy=&order="""
        params = {
            "limit": limit,
            "skip": skip,
            "select": _join_select(select),
            "sortBy": sort_by,
            "order": order,
        }
        return self._request("GET", params=params)

    def get_product(self, product_id: int) -> requests.Response:
        """GET /products/{id}"""
        return self._request("GET", f"/{product_id}")

    def search_products(self, query: Optional[str] = None) -> requests.Response:
        """GET /products/search?q=（query省略時はqなし）"""
        return self._request("GET", "/search", params={"q": query})

    def get_categories(self) -> requests.Response:
        """GET /products/categories"""
        return self._request("GET", "/categories")

    def get_category_list(self) -> requests.Response:
        """GET /products/category-list"""
        return self._request("GET", "/category-list")

    def get_products_by_category(self, slug: str) -> requests.Response:
        """GET /products/category/{slug}"""
        return self._request("GET", f"/category/{slug}")

    # ---------- 更新系（DummyJSON側では永続化されない） ----------

    def add_product(self, payload: Dict[str, Any]) -> requests.Response:
        """POST /products/add"""
        return self._request("POST", "/add", json=payload)

    def update_product(self, product_id: int, payload: Dict[str, Any]) -> requests.Response:
        """PUT /products/{id}"""
        return self._request("PUT", f"/{product_id}", json=payload)

    def patch_product(self, product_id: int, payload: Dict[str, Any]) -> requests.Response:
        """PATCH /products/{id}"""
        return self._request("PATCH", f"/{product_id}", json=payload)

    def delete_product(self, product_id: int) -> requests.Response:
        """DELETE /products/{id}"""
        return self._request("DELETE", f"/{product_id}")

    # ---------- ページネーション ----------

    def fetch_page(self, limit: int, skip: int = 0) -> ProductPage:
        """
        1ページ分の商品を取得

        Parameters:
            limit: ページサイズ
            skip: オフセット

        Returns:
            ProductPage

        Raises:
            APIError: 200以外のステータス、またはレスポンスの解析に失敗した場合
        """
        response = self.list_products(limit=limit, skip=skip)
        if response.status_code != 200:
            logger.error(
                f"HTTPエラー: {response.status_code} - limit={limit}, skip={skip}"
            )
            raise APIError(
                f"HTTPエラー: {response.status_code}", status_code=response.status_code
            )

        try:
            return ProductPage.model_validate(response.json())
        except ValidationError as e:
            logger.error(f"レスポンス形式エラー: {str(e)}")
            raise APIError(f"レスポンスの形式が不正です: {str(e)}")
        except ValueError as e:
            logger.error(f"JSONパースエラー: {str(e)}")
            raise APIError(f"レスポンスのパースに失敗しました: {str(e)}")

    def fetch_all_products(self, limit: Optional[int] = None) -> List[ProductResponse]:
        """
        全商品を取得（ページネーション）

        skip=0 から limit 件ずつ順番に取得し、取得件数が limit 未満の
        ページが返った時点で終了する。総件数が limit の倍数の場合は
        空ページを1回余分に取得して終了する。

        Parameters:
            limit: ページサイズ（1以上、既定は settings.PAGE_SIZE）

        Returns:
            取得順に連結した商品リスト

        Raises:
            ValueError: limit が1未満の場合
            APIError: いずれかのページ取得に失敗した場合
        """
        if limit is None:
            limit = settings.PAGE_SIZE
        # limit=0 はDummyJSONでは「全件」を意味するためページ送りにならない
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        products: List[ProductResponse] = []
        skip = 0
        while True:
            page = self.fetch_page(limit=limit, skip=skip)
            products.extend(page.products)
            if len(page.products) < limit:
                break
            skip += limit

        logger.info(f"全商品取得完了: {len(products)}件")
        return products
