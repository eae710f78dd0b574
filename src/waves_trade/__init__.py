"""Waves node and matcher client."""

from waves_trade.core.config import DEFAULT_NODE, Config
from waves_trade.exceptions import (
    InvalidAddressError,
    NodeError,
    ProtocolError,
    RemoteError,
    TransportError,
)
from waves_trade.services.node_client import NodeClient

__all__ = [
    "DEFAULT_NODE",
    "Config",
    "NodeClient",
    "NodeError",
    "InvalidAddressError",
    "TransportError",
    "RemoteError",
    "ProtocolError",
]
