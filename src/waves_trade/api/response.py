"""Response interpreter: status classification, field extraction and decoding.

Every failure surfaces as ``RemoteError`` (non-200 with a readable message) or
``ProtocolError`` (anything the call did not expect). Nothing falls back to a
default value.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

import requests

from waves_trade.exceptions import ProtocolError, RemoteError
from waves_trade.utils import pipe

HTTP_OK = 200

# 資料模型需提供 from_dict 類別方法
T = TypeVar("T")


def parse_body(response: requests.Response) -> Any:
    """純函數：解析回應內容為 JSON 樹"""
    try:
        return response.json()
    except ValueError as e:
        raise ProtocolError(
            f"Malformed response body (HTTP {response.status_code}): {e}"
        ) from e


def check_status(response: requests.Response) -> requests.Response:
    """檢查狀態碼，非 200 時以伺服器的 message 欄位拋出 RemoteError"""
    if response.status_code == HTTP_OK:
        return response

    tree = parse_body(response)
    if not isinstance(tree, dict) or tree.get("message") is None:
        raise ProtocolError(
            f"Error response without message (HTTP {response.status_code})"
        )
    message = tree["message"]
    raise RemoteError(
        message if isinstance(message, str) else str(message),
        status_code=response.status_code,
    )


def _descend(tree: Any, keys: Sequence[str]) -> Any:
    if not keys:
        return tree
    head = keys[0]
    if not isinstance(tree, dict) or head not in tree:
        raise ProtocolError(f"Missing field '{head}' in response")
    return _descend(tree[head], keys[1:])


def extract_field(tree: Any, keys: Sequence[str], kind: type[T]) -> T:
    """依序走訪欄位並回傳指定型別的值

    Args:
        tree: 已解析的 JSON 樹
        keys: 由根節點開始的欄位名稱，空序列表示根節點本身
        kind: 預期型別 (int 或 str)

    Returns:
        最後一個欄位的值
    """
    value = _descend(tree, keys)
    # bool 是 int 的子類別，需排除
    if isinstance(value, bool) or not isinstance(value, kind):
        path = ".".join(keys) or "<root>"
        raise ProtocolError(
            f"Field '{path}' is {type(value).__name__}, expected {kind.__name__}"
        )
    return value


def decode_one(tree: Any, model: type[T]) -> T:
    """純函數：將 JSON 物件解碼為單一資料模型"""
    if not isinstance(tree, dict):
        raise ProtocolError(
            f"Expected JSON object for {model.__name__}, got {type(tree).__name__}"
        )
    try:
        return model.from_dict(tree)
    except (KeyError, TypeError, ValueError) as e:
        raise ProtocolError(f"Cannot decode {model.__name__}: {e!r}") from e


def decode_many(tree: Any, model: type[T]) -> list[T]:
    """純函數：將 JSON 陣列解碼為資料模型列表"""
    if not isinstance(tree, list):
        raise ProtocolError(
            f"Expected JSON array of {model.__name__}, got {type(tree).__name__}"
        )
    return [decode_one(item, model) for item in tree]


def merge_order_status(tree: Any) -> dict[str, Any]:
    """下單回應的特殊處理

    撮合引擎將委託狀態放在 message 的同層 status 欄位，
    解碼前需合併進 message 物件。
    """
    if not isinstance(tree, dict):
        raise ProtocolError("Order placement response is not a JSON object")
    message = tree.get("message")
    if not isinstance(message, dict):
        raise ProtocolError("Order placement response has no 'message' object")
    status = extract_field(tree, ["status"], str)
    return {**message, "status": status}


def read_field(
    response: requests.Response, keys: Sequence[str], kind: type[T]
) -> T:
    """檢查狀態並擷取欄位"""
    return pipe(
        response,
        check_status,
        parse_body,
        lambda tree: extract_field(tree, keys, kind),
    )


def read_one(response: requests.Response, model: type[T]) -> T:
    """檢查狀態並解碼為單一資料模型"""
    return pipe(response, check_status, parse_body, lambda tree: decode_one(tree, model))


def read_many(response: requests.Response, model: type[T]) -> list[T]:
    """檢查狀態並解碼為資料模型列表"""
    return pipe(
        response, check_status, parse_body, lambda tree: decode_many(tree, model)
    )
