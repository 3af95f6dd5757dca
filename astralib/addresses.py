"""IP addresses and socket addresses (IP address plus port)."""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from enum import IntEnum


class IPAddressType(IntEnum):
    """Address family of an :class:`IPAddress`."""

    IPV4 = 0
    IPV6 = 1


_SIZES = {IPAddressType.IPV4: 4, IPAddressType.IPV6: 16}
_FAMILIES = {IPAddressType.IPV4: socket.AF_INET, IPAddressType.IPV6: socket.AF_INET6}


@dataclass(frozen=True)
class IPAddress:
    """An IPv4 or IPv6 address held as its packed network-order bytes.

    The address is valid only when the number of bytes matches its type.
    """

    packed: bytes = b""
    type: IPAddressType = IPAddressType.IPV4

    def __post_init__(self) -> None:
        object.__setattr__(self, "packed", bytes(self.packed))
        object.__setattr__(self, "type", IPAddressType(self.type))

    @classmethod
    def parse(cls, text: str) -> "IPAddress":
        """Parse dotted IPv4 or textual IPv6; an unparsable text gives an invalid address."""
        for kind in (IPAddressType.IPV4, IPAddressType.IPV6):
            try:
                return cls(socket.inet_pton(_FAMILIES[kind], text), kind)
            except (OSError, ValueError):
                continue
        return cls()

    def is_valid(self) -> bool:
        return len(self.packed) == _SIZES[self.type]

    def is_loopback(self) -> bool:
        if not self.is_valid():
            return False
        if self.type is IPAddressType.IPV4:
            return self.packed[0] == 127
        return self.packed == bytes(15) + b"\x01"

    def is_private(self) -> bool:
        if not self.is_valid():
            return False
        if self.type is IPAddressType.IPV4:
            first, second = self.packed[0], self.packed[1]
            return (
                first == 10
                or (first == 172 and 16 <= second <= 31)
                or (first == 192 and second == 168)
            )
        return (self.packed[0] & 0xFE) == 0xFC

    def is_multicast(self) -> bool:
        if not self.is_valid():
            return False
        if self.type is IPAddressType.IPV4:
            return (self.packed[0] & 0xF0) == 0xE0
        return self.packed[0] == 0xFF

    def __str__(self) -> str:
        if not self.is_valid():
            return ""
        return socket.inet_ntop(_FAMILIES[self.type], self.packed)


@dataclass(frozen=True)
class SocketAddress:
    """An IP address together with a port number."""

    address: IPAddress = field(default_factory=IPAddress)
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def from_host(cls, host: str, port: int) -> "SocketAddress":
        """Build a socket address from a textual IP address and a port."""
        return cls(IPAddress.parse(host), port)

    def is_valid(self) -> bool:
        return self.address.is_valid()

    def __str__(self) -> str:
        if self.address.type is IPAddressType.IPV6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"