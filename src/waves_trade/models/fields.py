"""JSON 欄位型別檢查，型別不符時拋出 TypeError"""

from typing import Any


def ensure_object(data: Any, name: str) -> dict[str, Any]:
    """純函數：確認為 JSON 物件"""
    if not isinstance(data, dict):
        raise TypeError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def ensure_list(data: Any, name: str) -> list[Any]:
    """純函數：確認為 JSON 陣列"""
    if not isinstance(data, list):
        raise TypeError(f"{name} must be a JSON array, got {type(data).__name__}")
    return data


def get_int(data: dict[str, Any], key: str, required: bool = False) -> int | None:
    """取得整數欄位，bool 不視為整數"""
    value = data[key] if required else data.get(key)
    if value is None and not required:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def get_str(data: dict[str, Any], key: str, required: bool = False) -> str | None:
    """取得字串欄位"""
    value = data[key] if required else data.get(key)
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value
