"""Request dispatcher: resolves paths against the node address and sends them.

The dispatcher never looks at the response status; interpretation is left to
``waves_trade.api.response``.
"""

import logging
import threading
from collections.abc import Iterable
from urllib.parse import urlsplit

import requests

from waves_trade.exceptions import InvalidAddressError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def validate_address(url: str) -> str:
    """純函數：驗證節點地址並去除結尾斜線"""
    if not isinstance(url, str):
        raise InvalidAddressError(f"Node address must be a string, got {url!r}")
    try:
        parts = urlsplit(url)
        # 存取 port 才會檢查埠號格式
        parts.port
    except ValueError as e:
        raise InvalidAddressError(f"Invalid node address: {url}") from e

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidAddressError(f"Invalid node address: {url}")
    # 路徑直接接在地址後，不接受查詢字串或片段
    if "?" in url or "#" in url:
        raise InvalidAddressError(f"Node address must not contain a query or fragment: {url}")
    return url.rstrip("/")


class RequestDispatcher:
    """HTTP 請求分派器

    持有固定的節點地址。requests.Session 不保證執行緒安全，
    因此未指定 session 時每個執行緒各自建立一個，close() 會全部釋放。
    由呼叫端傳入的 session 則由呼叫端負責並行使用與釋放。
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self.base_url = validate_address(base_url)
        self.timeout = timeout
        self._shared_session = session
        self._local = threading.local()
        self._owned_sessions: list[requests.Session] = []
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """目前執行緒使用的 Session"""
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._owned_sessions.append(session)
        return session

    def resolve(self, path: str) -> str:
        """將相對路徑組合為完整網址"""
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(
        self, path: str, headers: Iterable[tuple[str, str]] = ()
    ) -> requests.Response:
        """發送 GET 請求

        Args:
            path: 相對路徑
            headers: 依序加入的 (名稱, 值) 標頭

        Returns:
            原始回應，不檢查狀態碼
        """
        url = self.resolve(path)
        logger.debug("GET %s", url)
        return self._execute(
            self.session.get, url, headers=dict(headers), timeout=self.timeout
        )

    def post(self, path: str, body: str) -> requests.Response:
        """發送帶 JSON 內容的 POST 請求"""
        url = self.resolve(path)
        logger.debug("POST %s", url)
        return self._execute(
            self.session.post,
            url,
            data=body.encode("utf-8"),
            headers=dict(JSON_HEADERS),
            timeout=self.timeout,
        )

    def _execute(self, send, url: str, **kwargs) -> requests.Response:
        try:
            return send(url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    def close(self) -> None:
        """釋放自行建立的所有 Session"""
        with self._lock:
            sessions, self._owned_sessions = self._owned_sessions, []
            self._local = threading.local()
        for session in sessions:
            session.close()

    def __enter__(self) -> "RequestDispatcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
