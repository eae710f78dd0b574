"""Services for waves trade client."""

from .node_client import NodeClient

__all__ = ["NodeClient"]
