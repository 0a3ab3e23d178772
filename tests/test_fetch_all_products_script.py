"""
全商品取得スクリプトのテスト
"""

from unittest.mock import MagicMock, patch

from app.scripts import fetch_all_products
from app.services.dummyjson_api import APIError


def _patched_api(products=None, error=None):
    api = MagicMock()
    api.__enter__.return_value = api
    api.__exit__.return_value = False
    if error is not None:
        api.fetch_all_products.side_effect = error
    else:
        api.fetch_all_products.return_value = products or []
    return api


class TestFetchAllProductsScript:
    """python -m app.scripts.fetch_all_products"""

    def test_success(self, capsys):
        """取得件数を表示して0で終了"""
        api = _patched_api(products=[object()] * 194)
        with patch.object(fetch_all_products, "ProductsAPI", return_value=api):
            exit_code = fetch_all_products.main(["--limit", "50"])

        assert exit_code == 0
        api.fetch_all_products.assert_called_once_with(limit=50)
        assert "194件" in capsys.readouterr().out

    def test_api_error(self, capsys):
        """APIError なら1で終了"""
        api = _patched_api(error=APIError("HTTPエラー: 500", status_code=500))
        with patch.object(fetch_all_products, "ProductsAPI", return_value=api):
            exit_code = fetch_all_products.main([])

        assert exit_code == 1
        assert "HTTPエラー: 500" in capsys.readouterr().out

    def test_invalid_limit(self):
        """limit=0 は ValueError として扱い1で終了"""
        api = _patched_api(error=ValueError("limit must be >= 1, got 0"))
        with patch.object(fetch_all_products, "ProductsAPI", return_value=api):
            assert fetch_all_products.main(["--limit", "0"]) == 1
