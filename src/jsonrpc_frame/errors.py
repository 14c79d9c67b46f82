"""Shared error types for request building and framing."""

from __future__ import annotations

from typing import Any


class ErrorCode:
    """Reserved JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600


class JsonRpcFrameError(Exception):
    """Base error for all jsonrpc-frame failures."""

    def __init__(self, message: str, *, code: int, data: Any = None) -> None:
        self.message = message
        self.code = code
        self.data = data
        super().__init__(message)


class SerializationError(JsonRpcFrameError):
    """A params value or method name could not be converted to JSON."""

    def __init__(self, detail: str, *, data: Any = None) -> None:
        self.detail = detail
        super().__init__(
            f"Value is not JSON serializable: {detail}",
            code=ErrorCode.PARSE_ERROR,
            data=data,
        )


class FrameDecodeError(JsonRpcFrameError):
    """A framed message or its request envelope is malformed."""

    def __init__(
        self, message: str, *, code: int = ErrorCode.INVALID_REQUEST, data: Any = None
    ) -> None:
        super().__init__(message, code=code, data=data)


class RequestConsumedError(JsonRpcFrameError):
    """A request builder was used again after ``prepare()``."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"Request {method!r} was already prepared",
            code=ErrorCode.INVALID_REQUEST,
        )
