"""JSON-RPC 2.0 request envelope.

Field order is part of the wire format: ``jsonrpc``, ``id``, ``method`` and
then, only when supplied, ``params``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

from jsonrpc_frame.framing import encode_frame


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    model_config = {"frozen": True}

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str
    method: str
    params: Any = None

    @property
    def has_params(self) -> bool:
        """Whether ``params`` was supplied, as opposed to defaulted."""
        return "params" in self.model_fields_set

    def to_json(self) -> str:
        """Serialize to compact JSON, leaving out ``params`` when not supplied."""
        exclude = None if self.has_params else {"params"}
        return self.model_dump_json(exclude=exclude)

    def to_frame(self) -> str:
        """Serialize and prepend the ``Content-Length`` header."""
        return encode_frame(self.to_json())
