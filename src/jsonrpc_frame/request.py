"""Request builder — method and params in, id and framed message out.

Params are serialized when they are attached, so a bad value fails at the
``with_params`` call that supplied it and ``prepare()`` itself cannot fail.

Usage::

    request_id, message = Request("textDocument/hover").with_params(
        {"position": {"line": 3, "character": 7}}
    ).prepare()
    transport.write(message.encode("utf-8"))
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from pydantic import ValidationError

from jsonrpc_frame.errors import FrameDecodeError, RequestConsumedError
from jsonrpc_frame.framing import content_length, encode_frame, split_frame
from jsonrpc_frame.ids import RequestIdGenerator, default_generator
from jsonrpc_frame.models import JsonRpcRequest
from jsonrpc_frame.serialization import to_json_value
from jsonrpc_frame.utils.telemetry import (
    ATTR_CONTENT_LENGTH,
    ATTR_HAS_PARAMS,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_UNSET: Any = object()


class PreparedRequest(NamedTuple):
    """The id allocated for a request and its framed wire text."""

    id: int
    message: str

    @property
    def data(self) -> bytes:
        """The framed message as UTF-8 bytes, ready for a transport."""
        return self.message.encode("utf-8")


class Request:
    """Single-use builder for one JSON-RPC request.

    The method name is stored verbatim.  Ids come from *generator*, or the
    process-wide :func:`~jsonrpc_frame.ids.default_generator` when omitted.
    """

    def __init__(self, method: str, *, generator: RequestIdGenerator | None = None) -> None:
        self._method = method
        self._generator = generator if generator is not None else default_generator()
        self._params: Any = _UNSET
        self._consumed = False

    @property
    def method(self) -> str:
        """The method name, exactly as given."""
        return self._method

    @property
    def has_params(self) -> bool:
        """Whether params were attached, including an explicit ``None``."""
        return self._params is not _UNSET

    @property
    def params(self) -> Any:
        """The attached params as JSON data, or ``None`` when nothing is attached."""
        return None if self._params is _UNSET else self._params

    def with_params(self, value: Any) -> Request:
        """Attach *value* as params, replacing any earlier params.

        Returns the builder itself so calls can be chained.  On failure the
        previously attached params are kept.

        Raises
        ------
        SerializationError
            If *value* cannot be represented as JSON.
        RequestConsumedError
            If the builder was already prepared.
        """
        self._ensure_pending()
        self._params = to_json_value(value)
        return self

    def prepare(self) -> PreparedRequest:
        """Allocate an id and produce the framed message, consuming the builder.

        Raises
        ------
        SerializationError
            If the method name cannot be encoded as JSON text.  No id is
            allocated and the builder stays usable.
        RequestConsumedError
            If the builder was already prepared.
        """
        self._ensure_pending()
        to_json_value(self._method)

        with _tracer.start_as_current_span("jsonrpc.prepare") as span:
            request_id = self._generator.next()
            fields: dict[str, Any] = {"id": request_id, "method": self._method}
            if self.has_params:
                fields["params"] = self._params
            envelope = JsonRpcRequest(**fields)
            body = envelope.to_json()
            length = content_length(body)

            span.set_attribute(ATTR_METHOD, self._method)
            span.set_attribute(ATTR_REQUEST_ID, request_id)
            span.set_attribute(ATTR_HAS_PARAMS, self.has_params)
            span.set_attribute(ATTR_CONTENT_LENGTH, length)

        self._consumed = True
        logger.debug("Prepared request %s %r (%d bytes)", request_id, self._method, length)
        return PreparedRequest(id=request_id, message=encode_frame(body))

    @staticmethod
    def parse(data: str | bytes) -> tuple[JsonRpcRequest, str | bytes]:
        """Decode the first framed request in *data*.

        Returns the request envelope and whatever follows the frame.

        Raises
        ------
        FrameDecodeError
            If the framing is malformed or the body is not a request.
        """
        body, remainder = split_frame(data)
        return Request.parse_json(body), remainder

    @staticmethod
    def parse_json(body: str | bytes) -> JsonRpcRequest:
        """Validate an unframed JSON body as a request envelope.

        Raises
        ------
        FrameDecodeError
            With code ``INVALID_REQUEST`` and the body as ``data`` if *body*
            is not JSON or not a request.
        """
        try:
            return JsonRpcRequest.model_validate_json(body)
        except ValidationError as exc:
            text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
            raise FrameDecodeError(str(exc), data=text) from exc

    def _ensure_pending(self) -> None:
        if self._consumed:
            raise RequestConsumedError(self._method)

    def __repr__(self) -> str:
        state = "prepared" if self._consumed else "pending"
        return f"Request(method={self._method!r}, has_params={self.has_params}, {state})"
