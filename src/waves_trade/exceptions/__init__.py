"""Custom exceptions for waves trade client."""

from .node import (
    InvalidAddressError,
    NodeError,
    ProtocolError,
    RemoteError,
    TransportError,
)

__all__ = [
    "NodeError",
    "InvalidAddressError",
    "TransportError",
    "RemoteError",
    "ProtocolError",
]
