"""
全商品取得スクリプト

DummyJSONの /products をページネーションで全件取得し、件数を表示する

使い方:
    python -m app.scripts.fetch_all_products
    python -m app.scripts.fetch_all_products --limit 50
"""
import sys
import argparse
import logging
from datetime import datetime

from dotenv import load_dotenv
load_dotenv()

from app.config import settings
from app.services.dummyjson_api import ProductsAPI, APIError

logger = logging.getLogger(__name__)


def main(argv=None):
    """メイン処理"""
    parser = argparse.ArgumentParser(description="DummyJSONの全商品を取得する")
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.PAGE_SIZE,
        help=f"1ページあたりの取得件数（既定: {settings.PAGE_SIZE}）",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("=" * 60)
    print("🚀 全商品取得")
    print(f"   実行日時: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"   接続先: {settings.DUMMYJSON_BASE_URL}")
    print("=" * 60)

    try:
        with ProductsAPI() as api:
            products = api.fetch_all_products(limit=args.limit)
    except (APIError, ValueError) as e:
        logger.error(f"全商品取得に失敗: {str(e)}")
        print(f"\n❌ エラーが発生しました: {str(e)}")
        return 1

    print(f"\n📊 取得件数: {len(products)}件")
    return 0


if __name__ == "__main__":
    sys.exit(main())
