"""jsonrpc-frame — JSON-RPC 2.0 requests with ``Content-Length`` framing."""

from __future__ import annotations

from jsonrpc_frame.errors import (
    ErrorCode,
    FrameDecodeError,
    JsonRpcFrameError,
    RequestConsumedError,
    SerializationError,
)
from jsonrpc_frame.framing import content_length, encode_frame, split_frame
from jsonrpc_frame.ids import RequestIdGenerator, default_generator
from jsonrpc_frame.models import JsonRpcRequest
from jsonrpc_frame.request import PreparedRequest, Request

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "FrameDecodeError",
    "JsonRpcFrameError",
    "JsonRpcRequest",
    "PreparedRequest",
    "Request",
    "RequestConsumedError",
    "RequestIdGenerator",
    "SerializationError",
    "content_length",
    "default_generator",
    "encode_frame",
    "split_frame",
]
