"""命令列工具 - 查詢節點與撮合引擎.

用法：
    # 區塊高度
    uv run waves-trade height

    # 原生資產或指定資產餘額
    uv run waves-trade balance 3N... --confirmations 10
    uv run waves-trade balance 3N... --asset Ft8X...

    # 委託簿（未指定交易對時使用 config/node.yaml 的預設交易對）
    uv run waves-trade orderbook WAVES Ft8X...
"""

import argparse
import logging
import sys

from waves_trade.api import format_order_book_data
from waves_trade.core.config import Config, parse_timeout
from waves_trade.exceptions import NodeError
from waves_trade.models import AssetPair
from waves_trade.services.node_client import NodeClient


def build_parser() -> argparse.ArgumentParser:
    """建立參數解析器"""
    parser = argparse.ArgumentParser(prog="waves-trade", description="Waves 節點查詢工具")
    parser.add_argument("--node", help="節點地址（覆蓋配置）")
    parser.add_argument("--timeout", type=parse_timeout, default=False, help="逾時秒數，none 表示不設逾時")
    parser.add_argument("-v", "--verbose", action="store_true", help="顯示請求紀錄")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("height", help="區塊高度")

    balance = subparsers.add_parser("balance", help="帳戶餘額")
    balance.add_argument("address")
    balance.add_argument("--asset", help="資產ID，預設為 WAVES")
    balance.add_argument("--confirmations", type=int, help="確認數")

    subparsers.add_parser("matcher-key", help="撮合引擎公鑰")

    orderbook = subparsers.add_parser("orderbook", help="委託簿")
    orderbook.add_argument("amount_asset", nargs="?")
    orderbook.add_argument("price_asset", nargs="?")

    status = subparsers.add_parser("order-status", help="委託狀態")
    status.add_argument("order_id")
    status.add_argument("amount_asset", nargs="?")
    status.add_argument("price_asset", nargs="?")

    return parser


def resolve_pair(args, config: Config) -> AssetPair:
    """從參數或配置取得交易對"""
    if args.amount_asset and args.price_asset:
        return AssetPair(args.amount_asset, args.price_asset)
    if config.default_pair is None:
        raise SystemExit("未指定交易對，且 config/node.yaml 未設定 matcher.default_pair")
    return config.default_pair


def run(args, config: Config) -> None:
    """執行子命令"""
    timeout = config.timeout if args.timeout is False else args.timeout
    with NodeClient(args.node or config.node_url, timeout=timeout) as node:
        if args.command == "height":
            print(node.get_height())
        elif args.command == "balance":
            if args.asset:
                print(node.get_asset_balance(args.address, args.asset))
            else:
                print(node.get_balance(args.address, args.confirmations))
        elif args.command == "matcher-key":
            print(node.get_matcher_key())
        elif args.command == "orderbook":
            order_book = node.get_order_book(resolve_pair(args, config))
            print(format_order_book_data(order_book).to_string(index=False))
        elif args.command == "order-status":
            print(node.get_order_status(args.order_id, resolve_pair(args, config)))


def main(argv: list[str] | None = None) -> int:
    """主程式入口"""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = Config()
    try:
        run(args, config)
    except NodeError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
