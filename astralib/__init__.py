"""IP addresses, DNS lookups, HTTP message handling and small string, array, IO and system helpers."""

__version__ = "0.1.0"

__all__ = [
    "addresses",
    "array_lib",
    "dns",
    "http_message",
    "io_lib",
    "string_lib",
    "system_lib",
]