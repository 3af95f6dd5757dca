"""HTTP request and response messages and their HTTP/1.1 wire form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_CONTENT_TYPE = "Content-Type"


class HttpMethod(IntEnum):
    """Request methods understood by the client and server."""

    GET = 0
    POST = 1
    PUT = 2
    DELETE = 3
    HEAD = 4
    OPTIONS = 5
    PATCH = 6


class HttpParseError(ValueError):
    """Raised when an HTTP message cannot be parsed.

    ``status_code`` is the status a server should answer with.
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


def _to_bytes(body: bytes | bytearray | str | list[int]) -> bytes:
    if isinstance(body, str):
        return body.encode(_ENCODING)
    return bytes(body)


@dataclass
class HttpRequest:
    """An HTTP request; the timeout is in milliseconds."""

    method: HttpMethod = HttpMethod.GET
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    timeout: int = 30000

    def __post_init__(self) -> None:
        self.method = HttpMethod(self.method)
        self.body = _to_bytes(self.body)

    def header(self, name: str) -> str:
        """Return the named header, or an empty string when it is absent."""
        return self.headers.get(name, "")

    def content_type(self) -> str:
        return self.header(_CONTENT_TYPE)

    def set_content_type(self, content_type: str) -> None:
        self.headers[_CONTENT_TYPE] = content_type


@dataclass
class HttpResponse:
    """An HTTP response; a status code of 0 means no response was obtained."""

    status_code: int = 0
    status_message: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.body = _to_bytes(self.body)

    def header(self, name: str) -> str:
        """Return the named header, or an empty string when it is absent."""
        return self.headers.get(name, "")

    def content_type(self) -> str:
        return self.header(_CONTENT_TYPE)

    def set_content_type(self, content_type: str) -> None:
        self.headers[_CONTENT_TYPE] = content_type

    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


def parse_header_lines(block: str) -> dict[str, str]:
    """Parse CRLF-separated ``Name: value`` lines; lines without a colon are ignored."""
    headers: dict[str, str] = {}
    for line in block.split("\r\n"):
        name, colon, value = line.partition(":")
        if colon:
            headers[name] = value.strip(" \t")
    return headers


def _split_message(data: bytes) -> tuple[str, str, bytes]:
    """Split raw bytes into start line, header block and body."""
    if not data:
        raise HttpParseError("Empty response")
    head, separator, body = bytes(data).partition(b"\r\n\r\n")
    if not separator:
        raise HttpParseError("Invalid message format")
    start_line, _, header_block = head.decode(_ENCODING, _ERRORS).partition("\r\n")
    return start_line, header_block, body


def parse_response(data: bytes) -> HttpResponse:
    """Parse a complete HTTP response."""
    status_line, header_block, body = _split_message(data)
    version_end = status_line.find(" ")
    if version_end < 0:
        raise HttpParseError("Invalid response format")
    code_end = status_line.find(" ", version_end + 1)
    if code_end < 0:
        raise HttpParseError("Invalid response format")
    try:
        status_code = int(status_line[version_end + 1 : code_end])
    except ValueError as error:
        raise HttpParseError("Invalid response format") from error
    return HttpResponse(
        status_code=status_code,
        status_message=status_line[code_end + 1 :],
        headers=parse_header_lines(header_block),
        body=body,
    )


def parse_request(data: bytes) -> HttpRequest:
    """Parse a complete HTTP request; the request target becomes the URL."""
    request_line, header_block, body = _split_message(data)
    method_end = request_line.find(" ")
    if method_end < 0:
        raise HttpParseError("Bad Request")
    path_end = request_line.find(" ", method_end + 1)
    if path_end < 0:
        raise HttpParseError("Bad Request")
    method_name = request_line[:method_end]
    try:
        method = HttpMethod[method_name]
    except KeyError:
        raise HttpParseError("Method Not Allowed", 405) from None
    return HttpRequest(
        method=method,
        url=request_line[method_end + 1 : path_end],
        headers=parse_header_lines(header_block),
        body=body,
    )


def _header_lines(headers: Mapping[str, str]) -> list[str]:
    return [f"{name}: {value}\r\n" for name, value in sorted(headers.items())]


def _finish(lines: list[str], body: bytes) -> bytes:
    if body:
        lines.append(f"Content-Length: {len(body)}\r\n")
    lines.append("\r\n")
    return "".join(lines).encode(_ENCODING, _ERRORS) + body


def format_request(
    request: HttpRequest, host: str, path: str, default_headers: Mapping[str, str]
) -> bytes:
    """Serialise a request; default headers the request does not set are included."""
    lines = [f"{request.method.name} {path} HTTP/1.1\r\n", f"Host: {host}\r\n"]
    defaults = {name: value for name, value in default_headers.items() if not request.header(name)}
    lines.extend(_header_lines(defaults))
    lines.extend(_header_lines(request.headers))
    return _finish(lines, request.body)


def format_response(response: HttpResponse) -> bytes:
    """Serialise a response in HTTP/1.1 form."""
    lines = [f"HTTP/1.1 {response.status_code} {response.status_message}\r\n"]
    lines.extend(_header_lines(response.headers))
    return _finish(lines, response.body)