"""Header-based authentication for matcher order listings.

Order listing is the only call authenticated through headers instead of a
signed body: the caller signs ``public_key ++ int64_be(timestamp)`` and sends
the timestamp and signature as ``Timestamp`` / ``Signature`` headers.
"""

import struct

from waves_trade.models import PUBLIC_KEY_LENGTH


def build_auth_payload(public_key: bytes, timestamp: int) -> bytes:
    """純函數：組合待簽章的位元組 (公鑰 + 8 位元組大端序時間戳)"""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise ValueError(
            f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
        )
    return public_key + struct.pack(">q", timestamp)


def auth_headers(timestamp: int, signature: str) -> list[tuple[str, str]]:
    """純函數：組合驗證標頭"""
    return [
        ("Timestamp", str(timestamp)),
        ("Signature", signature),
    ]
