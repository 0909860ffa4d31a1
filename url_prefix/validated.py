# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Adapters for hosts and URLs that were already validated elsewhere.

Validation itself is not done here. Any object exposing the attributes of
ValidatedHost or ValidatedUrl is accepted, e.g. a pydantic HttpUrl for the
URL adapters, or ipaddress.IPv4Address / IPv6Address for the IP adapters.
"""

import logging
import typing
from ipaddress import IPv4Address, IPv6Address
from typing import FrozenSet, Optional, Tuple, Union

from .exceptions import UnknownProtocolError
from .models import Protocol
from .prefix import create_prefix
from .utils import bracket_ipv6

logger = logging.getLogger(__name__)


class ValidatedHost(typing.Protocol):
    """A domain, IPv4 or IPv6 host with an optional port"""

    @property
    def host(self) -> str: ...

    @property
    def port(self) -> Optional[int]: ...


class ValidatedUrl(typing.Protocol):
    """A URL whose scheme, host, port and path are known to be well-formed"""

    @property
    def scheme(self) -> str: ...

    @property
    def host(self) -> Optional[str]: ...

    @property
    def port(self) -> Optional[int]: ...

    @property
    def path(self) -> Optional[str]: ...


HostLike = Union[ValidatedHost, IPv4Address, IPv6Address]


def _split_host(value: HostLike) -> Tuple[str, Optional[int]]:
    if isinstance(value, (IPv4Address, IPv6Address)):
        return str(value), None
    return value.host, value.port


def create_prefix_with_validated_domain(
    protocol: Protocol, domain: ValidatedHost, path: Optional[str] = None
) -> str:
    """Create a URL prefix from a validated domain and its optional port"""
    host, port = _split_host(domain)
    return create_prefix(protocol, host, port, path)


def create_prefix_with_validated_ipv4(
    protocol: Protocol,
    ipv4: Union[ValidatedHost, IPv4Address],
    path: Optional[str] = None,
) -> str:
    """Create a URL prefix from a validated IPv4 address and its optional port"""
    host, port = _split_host(ipv4)
    return create_prefix(protocol, host, port, path)


def create_prefix_with_validated_ipv6(
    protocol: Protocol,
    ipv6: Union[ValidatedHost, IPv6Address],
    path: Optional[str] = None,
) -> str:
    """
    Create a URL prefix from a validated IPv6 address and its optional port.

    The address text is kept as given and wrapped in brackets.

    Example:
        >>> create_prefix_with_validated_ipv6(Protocol.HTTP, IPv6Address("::1"))
        'http://[::1]'
    """
    host, port = _split_host(ipv6)
    return create_prefix(protocol, bracket_ipv6(host), port, path)


def create_prefix_with_validated_host(
    protocol: Protocol, host: HostLike, path: Optional[str] = None
) -> str:
    """
    Create a URL prefix from any validated host (domain, IPv4 or IPv6).

    A validated domain or IPv4 address never contains ":", so host text
    with a colon is an IPv6 literal and gets bracketed.
    """
    text, port = _split_host(host)
    if ":" in text:
        text = bracket_ipv6(text)
    return create_prefix(protocol, text, port, path)


HTTP_PROTOCOLS = frozenset({Protocol.HTTP, Protocol.HTTPS})
HTTP_FTP_PROTOCOLS = frozenset({Protocol.HTTP, Protocol.HTTPS, Protocol.FTP})


def _create_prefix_from_url(url: ValidatedUrl, allowed: FrozenSet[Protocol]) -> str:
    protocol = Protocol.from_name(url.scheme)
    if protocol not in allowed:
        names = ", ".join(sorted(p.name for p in allowed))
        raise UnknownProtocolError(
            url.scheme, f"Unsupported URL scheme '{url.scheme}'. Allowed: {names}"
        )

    # A URL without a host is passed through as "scheme://", like create_prefix
    # does with an empty host.
    host = url.host or ""
    if ":" in host:
        host = bracket_ipv6(host)

    path = url.path
    if path in ("", "/"):
        path = None

    logger.debug(f"Building prefix from validated {protocol.name} URL for host {host}")
    return create_prefix(protocol, host, url.port, path)


def create_prefix_with_validated_http_url(url: ValidatedUrl) -> str:
    """
    Create a URL prefix from a validated HTTP(S) URL

    Raises:
        UnknownProtocolError: If the URL scheme is not http or https
    """
    return _create_prefix_from_url(url, HTTP_PROTOCOLS)


def create_prefix_with_validated_http_ftp_url(url: ValidatedUrl) -> str:
    """
    Create a URL prefix from a validated HTTP(S) or FTP URL

    Raises:
        UnknownProtocolError: If the URL scheme is not http, https or ftp
    """
    return _create_prefix_from_url(url, HTTP_FTP_PROTOCOLS)
