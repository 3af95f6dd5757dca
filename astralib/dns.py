"""Host name resolution to :class:`~astralib.addresses.IPAddress` values."""

from __future__ import annotations

import socket

from astralib.addresses import IPAddress, IPAddressType


def _ip_from_sockaddr(family: int, sockaddr: tuple) -> IPAddress:
    host = sockaddr[0].split("%", 1)[0]
    kind = IPAddressType.IPV6 if family == socket.AF_INET6 else IPAddressType.IPV4
    return IPAddress(socket.inet_pton(family, host), kind)


class DnsResolver:
    """Resolves host names; failures give empty results and set ``last_error``."""

    def __init__(self) -> None:
        self.last_error = ""

    def resolve(self, hostname: str) -> list[IPAddress]:
        """Return every IPv4 and IPv6 address of ``hostname``, in resolver order."""
        try:
            results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
        except socket.gaierror as error:
            self.last_error = error.strerror or str(error)
            return []
        except UnicodeError as error:
            self.last_error = str(error)
            return []
        return [
            _ip_from_sockaddr(family, sockaddr)
            for family, _, _, _, sockaddr in results
            if family in (socket.AF_INET, socket.AF_INET6)
        ]

    def resolve_first(self, hostname: str) -> IPAddress:
        """Return the first address of ``hostname``, or an invalid address."""
        return next(iter(self.resolve(hostname)), IPAddress())

    def reverse_lookup(self, address: IPAddress) -> str:
        """Return the host name registered for ``address``, or an empty string."""
        if not address.is_valid():
            self.last_error = "Invalid IP address"
            return ""
        if address.type is IPAddressType.IPV6:
            sockaddr: tuple = (str(address), 0, 0, 0)
        else:
            sockaddr = (str(address), 0)
        try:
            hostname, _ = socket.getnameinfo(sockaddr, socket.NI_NAMEREQD)
        except socket.gaierror as error:
            self.last_error = error.strerror or str(error)
            return ""
        except OSError as error:
            self.last_error = str(error)
            return ""
        return hostname