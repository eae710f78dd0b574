"""HTTP protocol layer: request dispatching and response interpretation."""

from .auth import auth_headers, build_auth_payload
from .dispatcher import DEFAULT_TIMEOUT, RequestDispatcher, validate_address
from .market_data import format_order_book_data, format_orders_data
from .response import (
    check_status,
    decode_many,
    decode_one,
    extract_field,
    merge_order_status,
    parse_body,
    read_field,
    read_many,
    read_one,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "RequestDispatcher",
    "validate_address",
    "auth_headers",
    "build_auth_payload",
    "check_status",
    "parse_body",
    "extract_field",
    "decode_one",
    "decode_many",
    "merge_order_status",
    "read_field",
    "read_one",
    "read_many",
    "format_order_book_data",
    "format_orders_data",
]
