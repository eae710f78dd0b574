"""Node-related exceptions."""


class NodeError(Exception):
    """Base exception for node operations."""

    pass


class InvalidAddressError(NodeError):
    """Exception raised when the node address is malformed."""

    pass


class TransportError(NodeError):
    """Exception raised for network and IO failures."""

    pass


class RemoteError(NodeError):
    """Exception raised when the node answers with a non-200 status.

    訊息內容即為伺服器回傳的 ``message`` 欄位。
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProtocolError(NodeError):
    """Exception raised when a response does not match the expected shape."""

    pass
