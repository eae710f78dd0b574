"""時間相關工具函數"""

import time


def current_millis() -> int:
    """取得目前時間 (Unix 毫秒)"""
    return int(time.time() * 1000)
