import pandas as pd

from waves_trade.models import Order, OrderBook


def format_order_book_data(order_book: OrderBook) -> pd.DataFrame:
    """純函數：將委託簿轉為 DataFrame (買方在前，依價位排列)"""
    rows = [
        {"side": "bid", "price": level.price, "amount": level.amount}
        for level in order_book.bids
    ] + [
        {"side": "ask", "price": level.price, "amount": level.amount}
        for level in order_book.asks
    ]
    return pd.DataFrame(rows, columns=["side", "price", "amount"])


def format_orders_data(orders: list[Order]) -> pd.DataFrame:
    """純函數：將委託列表轉為 DataFrame"""
    df = pd.DataFrame(
        [
            {
                "id": order.id,
                "type": order.order_type.value if order.order_type else None,
                "amount": order.amount,
                "price": order.price,
                "filled": order.filled,
                "status": order.status,
                "timestamp": order.timestamp,
            }
            for order in orders
        ],
        columns=["id", "type", "amount", "price", "filled", "status", "timestamp"],
    )
    df["timestamp"] = pd.to_datetime(df["timestamp"], unit="ms")
    return df
