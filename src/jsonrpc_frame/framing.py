"""``Content-Length`` framing, as used by language-server style protocols.

A frame is one or more ``Name: value`` header lines, a blank line, and then
exactly ``Content-Length`` bytes of UTF-8 payload::

    Content-Length: 17\r\n
    \r\n
    {"jsonrpc":"2.0"}
"""

from __future__ import annotations

from typing import overload

from jsonrpc_frame.errors import ErrorCode, FrameDecodeError

CONTENT_LENGTH = "Content-Length"
HEADER_SEPARATOR = "\r\n"

_INVALID_HEADER = "the provided request header is invalid"
_INVALID_BODY = "the provided request is invalid"


def content_length(body: str) -> int:
    """Return the UTF-8 byte length of *body*."""
    return len(body.encode("utf-8"))


def encode_frame(body: str) -> str:
    """Prefix *body* with its ``Content-Length`` header and a blank line."""
    return f"{CONTENT_LENGTH}: {content_length(body)}{HEADER_SEPARATOR}{HEADER_SEPARATOR}{body}"


@overload
def split_frame(data: str) -> tuple[str, str]: ...
@overload
def split_frame(data: bytes) -> tuple[bytes, bytes]: ...


def split_frame(data: str | bytes) -> tuple[str, str] | tuple[bytes, bytes]:
    """Cut the first frame out of *data*.

    Returns ``(body, remainder)`` with the same type as *data*.  Header lines
    before ``Content-Length`` are skipped; so is anything after it up to the
    blank line.

    Raises
    ------
    FrameDecodeError
        If the header block is malformed or fewer than ``Content-Length``
        bytes of body are present.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data

    length: int | None = None
    rest = raw
    while length is None:
        line, rest = _next_line(rest)
        key, sep, value = line.partition(b":")
        if not sep:
            raise FrameDecodeError(_INVALID_HEADER, data=_text(line))
        if key.strip().lower() == CONTENT_LENGTH.lower().encode("ascii"):
            try:
                length = int(value.strip())
            except ValueError:
                raise FrameDecodeError(_INVALID_HEADER, data=_text(value)) from None
            if length < 0:
                raise FrameDecodeError(_INVALID_HEADER, data=_text(value))

    while True:
        line, rest = _next_line(rest)
        if not line.strip():
            break

    if len(rest) < length:
        raise FrameDecodeError(_INVALID_BODY, data=_text(rest))

    body, remainder = rest[:length], rest[length:]
    if isinstance(data, bytes):
        return body, remainder
    try:
        return body.decode("utf-8"), remainder.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FrameDecodeError(str(exc), code=ErrorCode.PARSE_ERROR) from exc


def _next_line(data: bytes) -> tuple[bytes, bytes]:
    line, sep, rest = data.partition(b"\n")
    if not sep:
        raise FrameDecodeError(_INVALID_HEADER, data=_text(data))
    return line, rest


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
