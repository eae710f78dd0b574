"""Order-related data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from waves_trade.models.fields import ensure_object, get_int, get_str
from waves_trade.models.market import AssetPair


class OrderType(Enum):
    """買賣方向"""

    BUY = "buy"
    SELL = "sell"


class OrderStatus:
    """撮合引擎回傳的委託狀態"""

    ACCEPTED = "Accepted"
    PARTIALLY_FILLED = "PartiallyFilled"
    FILLED = "Filled"
    CANCELLED = "Cancelled"
    NOT_FOUND = "NotFound"


@dataclass
class Order:
    """撮合委託模型"""

    id: str  # 委託ID
    order_type: OrderType | None = None  # 買賣方向
    amount: int | None = None  # 委託數量
    price: int | None = None  # 委託價格
    timestamp: int | None = None  # 委託時間 (毫秒)
    filled: int | None = None  # 已成交數量
    status: str | None = None  # 委託狀態
    asset_pair: AssetPair | None = None  # 交易對

    @property
    def is_active(self) -> bool:
        """委託是否仍在委託簿上"""
        return self.status in (OrderStatus.ACCEPTED, OrderStatus.PARTIALLY_FILLED)

    def to_dict(self) -> dict[str, Any]:
        """轉換為字典格式"""
        return {
            "id": self.id,
            "type": self.order_type.value if self.order_type else None,
            "amount": self.amount,
            "price": self.price,
            "timestamp": self.timestamp,
            "filled": self.filled,
            "status": self.status,
            "assetPair": self.asset_pair.to_dict() if self.asset_pair else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Order":
        """從字典創建Order"""
        data = ensure_object(data, "order")
        order_type = get_str(data, "type")
        asset_pair = data.get("assetPair")
        return cls(
            id=get_str(data, "id", required=True),
            order_type=OrderType(order_type) if order_type is not None else None,
            amount=get_int(data, "amount"),
            price=get_int(data, "price"),
            timestamp=get_int(data, "timestamp"),
            filled=get_int(data, "filled"),
            status=get_str(data, "status"),
            asset_pair=AssetPair.from_dict(asset_pair) if asset_pair is not None else None,
        )
