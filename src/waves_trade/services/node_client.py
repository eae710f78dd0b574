"""Node client: one method per domain action against the node and matcher."""

from collections.abc import Callable

import requests

from waves_trade.api import (
    DEFAULT_TIMEOUT,
    RequestDispatcher,
    auth_headers,
    build_auth_payload,
    check_status,
    decode_one,
    merge_order_status,
    parse_body,
    read_field,
    read_many,
    read_one,
)
from waves_trade.core.config import DEFAULT_NODE, Config
from waves_trade.exceptions import NodeError
from waves_trade.models import (
    AssetPair,
    Order,
    OrderBook,
    OrderType,
    PrivateKeyAccount,
    Transaction,
    TransactionBuilder,
    is_native_asset,
)
from waves_trade.utils import current_millis, pipe

MATCHER_ORDERBOOK = "/matcher/orderbook"


class NodeClient:
    """節點客戶端

    每個方法對應一次 HTTP 往返（下單為外部簽章後一次 POST）。
    交易建構與簽章委由 TransactionBuilder 實作。
    """

    def __init__(
        self,
        url: str = DEFAULT_NODE,
        builder: TransactionBuilder | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        clock: Callable[[], int] = current_millis,
    ):
        self.dispatcher = RequestDispatcher(url, session=session, timeout=timeout)
        self.builder = builder
        self.clock = clock

    @classmethod
    def from_config(
        cls, config: Config, builder: TransactionBuilder | None = None
    ) -> "NodeClient":
        """由 Config 建立客戶端"""
        return cls(config.node_url, builder=builder, timeout=config.timeout)

    @property
    def url(self) -> str:
        return self.dispatcher.base_url

    def close(self) -> None:
        self.dispatcher.close()

    def __enter__(self) -> "NodeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # === 查詢 ===

    def get_height(self) -> int:
        """取得目前區塊高度"""
        return read_field(self.dispatcher.get("/blocks/height"), ["height"], int)

    def get_balance(self, address: str, confirmations: int | None = None) -> int:
        """取得原生資產餘額

        Args:
            address: 錢包地址
            confirmations: 確認數，None 表示使用節點預設值
        """
        path = f"/addresses/balance/{address}"
        if confirmations is not None:
            path = f"{path}/{confirmations}"
        return read_field(self.dispatcher.get(path), ["balance"], int)

    def get_asset_balance(self, address: str, asset_id: str | None) -> int:
        """取得指定資產餘額，原生資產改走地址餘額端點"""
        if is_native_asset(asset_id):
            return self.get_balance(address)
        return read_field(
            self.dispatcher.get(f"/assets/balance/{address}/{asset_id}"),
            ["balance"],
            int,
        )

    # === 交易 ===

    def send(self, tx: Transaction) -> str:
        """廣播已簽章交易，回傳交易ID"""
        return read_field(self.dispatcher.post(tx.endpoint, tx.json), ["id"], str)

    def _require_builder(self) -> TransactionBuilder:
        if self.builder is None:
            raise NodeError("No TransactionBuilder configured for signed operations")
        return self.builder

    def transfer(
        self,
        account: PrivateKeyAccount,
        to_address: str,
        amount: int,
        fee: int,
        message: str | None = None,
    ) -> str:
        """轉帳原生資產"""
        return self.transfer_asset(account, to_address, amount, None, fee, None, message)

    def transfer_asset(
        self,
        account: PrivateKeyAccount,
        to_address: str,
        amount: int,
        asset_id: str | None,
        fee: int,
        fee_asset_id: str | None = None,
        message: str | None = None,
    ) -> str:
        """轉帳指定資產，手續費可用其他資產支付"""
        tx = self._require_builder().make_transfer_tx(
            account, to_address, amount, asset_id, fee, fee_asset_id, message
        )
        return self.send(tx)

    def lease(
        self, account: PrivateKeyAccount, to_address: str, amount: int, fee: int
    ) -> str:
        tx = self._require_builder().make_lease_tx(account, to_address, amount, fee)
        return self.send(tx)

    def cancel_lease(self, account: PrivateKeyAccount, tx_id: str, fee: int) -> str:
        tx = self._require_builder().make_lease_cancel_tx(account, tx_id, fee)
        return self.send(tx)

    def issue_asset(
        self,
        account: PrivateKeyAccount,
        name: str,
        description: str,
        quantity: int,
        decimals: int,
        reissuable: bool,
        fee: int,
    ) -> str:
        """發行新資產，回傳交易ID (即資產ID)"""
        tx = self._require_builder().make_issue_tx(
            account, name, description, quantity, decimals, reissuable, fee
        )
        return self.send(tx)

    def reissue_asset(
        self,
        account: PrivateKeyAccount,
        asset_id: str,
        quantity: int,
        reissuable: bool,
        fee: int,
    ) -> str:
        tx = self._require_builder().make_reissue_tx(
            account, asset_id, quantity, reissuable, fee
        )
        return self.send(tx)

    def burn_asset(
        self, account: PrivateKeyAccount, asset_id: str, amount: int, fee: int
    ) -> str:
        tx = self._require_builder().make_burn_tx(account, asset_id, amount, fee)
        return self.send(tx)

    def alias(
        self, account: PrivateKeyAccount, alias: str, scheme: str, fee: int
    ) -> str:
        """建立地址別名，scheme 為鏈代碼字元 (如 'T' 測試網)"""
        tx = self._require_builder().make_alias_tx(account, alias, scheme, fee)
        return self.send(tx)

    # === 撮合 ===

    def get_matcher_key(self) -> str:
        """取得撮合引擎公鑰"""
        return read_field(self.dispatcher.get("/matcher"), [], str)

    def create_order(
        self,
        account: PrivateKeyAccount,
        matcher_key: str,
        asset_pair: AssetPair,
        order_type: OrderType,
        price: int,
        amount: int,
        expiration: int,
        matcher_fee: int,
    ) -> Order:
        """下單

        撮合引擎回傳 {"status": ..., "message": {委託}}，
        狀態需合併進委託物件後再解碼。
        """
        tx = self._require_builder().make_order_tx(
            account,
            matcher_key,
            order_type,
            asset_pair,
            price,
            amount,
            expiration,
            matcher_fee,
        )
        return pipe(
            self.dispatcher.post(tx.endpoint, tx.json),
            check_status,
            parse_body,
            merge_order_status,
            lambda tree: decode_one(tree, Order),
        )

    def cancel_order(
        self, account: PrivateKeyAccount, asset_pair: AssetPair, order_id: str
    ) -> str:
        """撤單，回傳撮合引擎的狀態字串"""
        tx = self._require_builder().make_order_cancel_tx(account, asset_pair, order_id)
        return read_field(self.dispatcher.post(tx.endpoint, tx.json), ["status"], str)

    def get_order_book(self, asset_pair: AssetPair) -> OrderBook:
        """取得委託簿快照"""
        path = f"{MATCHER_ORDERBOOK}/{asset_pair.path}"
        return read_one(self.dispatcher.get(path), OrderBook)

    def get_order_status(self, order_id: str, asset_pair: AssetPair) -> str:
        """查詢委託狀態"""
        path = f"{MATCHER_ORDERBOOK}/{asset_pair.path}/{order_id}"
        return read_field(self.dispatcher.get(path), ["status"], str)

    def get_orders(
        self, account: PrivateKeyAccount, asset_pair: AssetPair | None = None
    ) -> list[Order]:
        """取得帳戶委託紀錄

        以標頭驗證 (Timestamp / Signature)，而非簽章交易內容。

        Args:
            account: 帳戶憑證
            asset_pair: 限定交易對，None 表示所有交易對
        """
        public_key = account.public_key_base58
        if asset_pair is None:
            path = f"{MATCHER_ORDERBOOK}/{public_key}"
        else:
            path = f"{MATCHER_ORDERBOOK}/{asset_pair.path}/publicKey/{public_key}"

        timestamp = self.clock()
        signature = self._require_builder().sign(
            account, build_auth_payload(account.public_key, timestamp)
        )
        response = self.dispatcher.get(path, auth_headers(timestamp, signature))
        return read_many(response, Order)
