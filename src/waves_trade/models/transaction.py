"""Transaction-related data models and the builder interface."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from waves_trade.models.account import PrivateKeyAccount
from waves_trade.models.market import AssetPair
from waves_trade.models.order import OrderType


class TransactionType(Enum):
    """交易種類與其廣播端點"""

    TRANSFER = "/assets/broadcast/transfer"
    LEASE = "/leasing/broadcast/lease"
    LEASE_CANCEL = "/leasing/broadcast/cancel"
    ISSUE = "/assets/broadcast/issue"
    REISSUE = "/assets/broadcast/reissue"
    BURN = "/assets/broadcast/burn"
    ALIAS = "/alias/broadcast/create"
    ORDER = "/matcher/orderbook"
    ORDER_CANCEL = "/matcher/orderbook/{pair}/cancel"

    def endpoint_for(self, asset_pair: AssetPair | None = None) -> str:
        """取得端點路徑，撤單需要交易對"""
        if self is TransactionType.ORDER_CANCEL:
            if asset_pair is None:
                raise ValueError("order cancel endpoint requires an asset pair")
            return self.value.format(pair=asset_pair.path)
        return self.value


@dataclass
class Transaction:
    """已簽章交易模型"""

    type: TransactionType
    data: dict[str, Any] = field(default_factory=dict)
    asset_pair: AssetPair | None = None  # 撤單時用於組合端點

    @property
    def endpoint(self) -> str:
        return self.type.endpoint_for(self.asset_pair)

    @property
    def json(self) -> str:
        """標準化 JSON 內容"""
        return json.dumps(self.data, separators=(",", ":"))


class TransactionBuilder(ABC):
    """交易建構與簽章的抽象介面

    實作者負責交易的位元組編碼與簽章，回傳的 Transaction 必須可直接廣播。
    """

    @abstractmethod
    def sign(self, account: PrivateKeyAccount, data: bytes) -> str:
        """對原始位元組簽章，回傳 Base58 編碼的簽章"""
        ...

    @abstractmethod
    def make_transfer_tx(
        self,
        account: PrivateKeyAccount,
        to_address: str,
        amount: int,
        asset_id: str | None,
        fee: int,
        fee_asset_id: str | None,
        message: str | None,
    ) -> Transaction: ...

    @abstractmethod
    def make_lease_tx(
        self, account: PrivateKeyAccount, to_address: str, amount: int, fee: int
    ) -> Transaction: ...

    @abstractmethod
    def make_lease_cancel_tx(
        self, account: PrivateKeyAccount, tx_id: str, fee: int
    ) -> Transaction: ...

    @abstractmethod
    def make_issue_tx(
        self,
        account: PrivateKeyAccount,
        name: str,
        description: str,
        quantity: int,
        decimals: int,
        reissuable: bool,
        fee: int,
    ) -> Transaction: ...

    @abstractmethod
    def make_reissue_tx(
        self,
        account: PrivateKeyAccount,
        asset_id: str,
        quantity: int,
        reissuable: bool,
        fee: int,
    ) -> Transaction: ...

    @abstractmethod
    def make_burn_tx(
        self, account: PrivateKeyAccount, asset_id: str, amount: int, fee: int
    ) -> Transaction: ...

    @abstractmethod
    def make_alias_tx(
        self, account: PrivateKeyAccount, alias: str, scheme: str, fee: int
    ) -> Transaction: ...

    @abstractmethod
    def make_order_tx(
        self,
        account: PrivateKeyAccount,
        matcher_key: str,
        order_type: OrderType,
        asset_pair: AssetPair,
        price: int,
        amount: int,
        expiration: int,
        matcher_fee: int,
    ) -> Transaction: ...

    @abstractmethod
    def make_order_cancel_tx(
        self, account: PrivateKeyAccount, asset_pair: AssetPair, order_id: str
    ) -> Transaction: ...
