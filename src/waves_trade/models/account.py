"""Account-related data models."""

from abc import ABC, abstractmethod

import base58

PUBLIC_KEY_LENGTH = 32


class PrivateKeyAccount(ABC):
    """帳戶憑證抽象介面

    金鑰推導與簽章由外部實作，本套件只需要公鑰位元組與錢包地址。
    """

    @property
    @abstractmethod
    def public_key(self) -> bytes:
        """原始公鑰 (32 bytes)"""
        ...

    @property
    @abstractmethod
    def address(self) -> str:
        """錢包地址 (Base58)"""
        ...

    @property
    def public_key_base58(self) -> str:
        """Base58 編碼的公鑰，用於路徑組合"""
        return base58.b58encode(self.public_key).decode("ascii")
