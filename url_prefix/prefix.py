# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
URL prefix construction.
"""

from typing import Optional

from .models import Protocol
from .utils import concat_with_slash


def create_prefix(
    protocol: Protocol,
    host: str,
    port: Optional[int] = None,
    path: Optional[str] = None,
) -> str:
    """
    Create a URL prefix string.

    The host is used as-is; it is not validated or normalized. The port is
    omitted when it equals the protocol's default port.

    Args:
        protocol: Protocol of the URL
        host: Domain, IPv4 address or bracketed IPv6 address
        port: Port number (optional)
        path: Path appended after a single "/" (optional)

    Returns:
        The URL prefix, e.g. "https://magiclen.org:8100/url-prefix"

    Example:
        >>> create_prefix(Protocol.HTTPS, "magiclen.org")
        'https://magiclen.org'
        >>> create_prefix(Protocol.HTTPS, "magiclen.org", 8100, "url-prefix")
        'https://magiclen.org:8100/url-prefix'
    """
    prefix = f"{protocol.name}://{host}"

    if port is not None and port != protocol.default_port:
        prefix += f":{port}"

    if path is not None:
        prefix = concat_with_slash(prefix, path)

    return prefix
