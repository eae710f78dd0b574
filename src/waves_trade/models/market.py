"""Market-related data models."""

from dataclasses import dataclass, field
from typing import Any

from waves_trade.models.fields import ensure_list, ensure_object, get_int, get_str

NATIVE_ASSET = "WAVES"


def is_native_asset(asset_id: str | None) -> bool:
    """判斷資產代碼是否為網路原生資產"""
    return asset_id is None or asset_id == NATIVE_ASSET


@dataclass(frozen=True)
class AssetPair:
    """交易對模型 (base/quote)"""

    amount_asset: str | None  # 基礎資產 (None 表示 WAVES)
    price_asset: str | None  # 計價資產 (None 表示 WAVES)

    @property
    def path(self) -> str:
        """路徑片段 `<base>/<quote>`"""
        return f"{self.amount_asset or NATIVE_ASSET}/{self.price_asset or NATIVE_ASSET}"

    def to_dict(self) -> dict[str, Any]:
        """轉換為字典格式"""
        return {
            "amountAsset": None if is_native_asset(self.amount_asset) else self.amount_asset,
            "priceAsset": None if is_native_asset(self.price_asset) else self.price_asset,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssetPair":
        """從字典創建AssetPair"""
        data = ensure_object(data, "assetPair")
        return cls(
            amount_asset=get_str(data, "amountAsset"),
            price_asset=get_str(data, "priceAsset"),
        )


@dataclass
class OrderBookLevel:
    """委託簿價位"""

    price: int
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"price": self.price, "amount": self.amount}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderBookLevel":
        data = ensure_object(data, "level")
        return cls(
            price=get_int(data, "price", required=True),
            amount=get_int(data, "amount", required=True),
        )


@dataclass
class OrderBook:
    """委託簿快照模型"""

    pair: AssetPair
    timestamp: int | None = None
    bids: list[OrderBookLevel] = field(default_factory=list)
    asks: list[OrderBookLevel] = field(default_factory=list)

    @property
    def best_bid(self) -> OrderBookLevel | None:
        """最佳買價"""
        return self.bids[0] if self.bids else None

    @property
    def best_ask(self) -> OrderBookLevel | None:
        """最佳賣價"""
        return self.asks[0] if self.asks else None

    @property
    def spread(self) -> int | None:
        """買賣價差，任一邊為空時回傳None"""
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask.price - self.best_bid.price

    def to_dict(self) -> dict[str, Any]:
        """轉換為字典格式"""
        return {
            "timestamp": self.timestamp,
            "pair": self.pair.to_dict(),
            "bids": [level.to_dict() for level in self.bids],
            "asks": [level.to_dict() for level in self.asks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderBook":
        """從字典創建OrderBook，bids/asks 必須存在"""
        data = ensure_object(data, "orderBook")
        return cls(
            pair=AssetPair.from_dict(data["pair"]),
            timestamp=get_int(data, "timestamp"),
            bids=[
                OrderBookLevel.from_dict(level)
                for level in ensure_list(data["bids"], "bids")
            ],
            asks=[
                OrderBookLevel.from_dict(level)
                for level in ensure_list(data["asks"], "asks")
            ],
        )
