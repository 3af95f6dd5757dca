# astralib

A small, self-contained library of networking and general-purpose helpers,
built on the Python standard library alone.

- `astralib.addresses` – `IPAddress` (IPv4 and IPv6 held as packed bytes, with
  `is_valid`, `is_loopback`, `is_private` and `is_multicast` checks),
  `IPAddressType`, and `SocketAddress` (an address plus a port).
- `astralib.dns` – `DnsResolver` with `resolve`, `resolve_first` and
  `reverse_lookup`. Failures give empty results and set `last_error`.
- `astralib.http_message` – `HttpRequest`, `HttpResponse`, `HttpMethod`,
  `HttpParseError`, and the functions `parse_request`, `parse_response`,
  `parse_header_lines`, `format_request` and `format_response`.
- `astralib.string_lib` – `length`, `substring`, `index_of`, `last_index_of`,
  `replace_all`, `split`, `to_upper`, `to_lower`, `trim`.
- `astralib.array_lib` – `length`, `push`, `pop`, `join`, `index_of`,
  `slice_range`, `concat` on Python lists.
- `astralib.io_lib` – `to_display`, `print_values`, `input_line`, `read_file`,
  `write_file`, `append_file`.
- `astralib.system_lib` – `time`, `clock`, `exit`, `getenv`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Addresses:

```python
from astralib.addresses import IPAddress, SocketAddress

addr = IPAddress.parse("192.168.1.10")
addr.is_private()                             # True
IPAddress.parse("not an address").is_valid()  # False
str(SocketAddress.from_host("::1", 8080))     # "[::1]:8080"
```

Name resolution:

```python
from astralib.dns import DnsResolver

resolver = DnsResolver()
first = resolver.resolve_first("localhost")
if not first.is_valid():
    print(resolver.last_error)
```

HTTP messages:

```python
from astralib.http_message import HttpMethod, HttpRequest, format_request, parse_response

request = HttpRequest(HttpMethod.POST, "/items", body=b"hi")
request.set_content_type("text/plain")
wire = format_request(request, "example.com", "/items", {"User-Agent": "client/1.0"})
# b"POST /items HTTP/1.1\r\nHost: example.com\r\nUser-Agent: client/1.0\r\n"
# b"Content-Type: text/plain\r\nContent-Length: 2\r\n\r\nhi"

response = parse_response(b"HTTP/1.1 404 Not Found\r\nX-A: 1\r\n\r\n")
response.status_code, response.is_client_error()   # (404, True)
```

Default headers are written only when the request does not set a non-empty
value of the same name. A message that cannot be parsed raises
`HttpParseError`; its `status_code` is 400, or 405 for a request method that
`HttpMethod` does not name.

Text, lists and files:

```python
from astralib import array_lib, io_lib, string_lib

string_lib.split("a,b,c", ",")        # ["a", "b", "c"]
string_lib.substring("hello", -3, 99) # "hello"  (bounds are clamped)
array_lib.join([1, 2, 3], "-")        # "1-2-3"
io_lib.to_display([True, None, "x"])  # "[true, null, x]"
```

Wrong argument types raise `TypeError`; `replace_all` with an empty search
string raises `ValueError`; the file functions raise `OSError` when a file
cannot be opened; `system_lib.exit` raises `SystemExit`.

## What it does not do

The package describes addresses and HTTP messages and resolves names, but it
opens no connections itself: there is no socket wrapper, no HTTP client that
sends requests, and no HTTP server. Use `format_request` / `parse_response`
(or `parse_request` / `format_response`) with your own transport. It also does
not list network interfaces, check whether ports are open, or provide math
helpers.