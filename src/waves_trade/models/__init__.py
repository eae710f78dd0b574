"""Data models for waves trade client."""

from .account import PUBLIC_KEY_LENGTH, PrivateKeyAccount
from .market import NATIVE_ASSET, AssetPair, OrderBook, OrderBookLevel, is_native_asset
from .order import Order, OrderStatus, OrderType
from .transaction import Transaction, TransactionBuilder, TransactionType

__all__ = [
    # Market models
    "NATIVE_ASSET",
    "is_native_asset",
    "AssetPair",
    "OrderBook",
    "OrderBookLevel",
    # Order models
    "Order",
    "OrderStatus",
    "OrderType",
    # Account models
    "PUBLIC_KEY_LENGTH",
    "PrivateKeyAccount",
    # Transaction models
    "Transaction",
    "TransactionBuilder",
    "TransactionType",
]
