# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
URL Prefix

Create URL prefix strings from a protocol, a host, a port number and a path
without any URL parsing. The port is left out when it is the protocol's
default port.

    >>> create_prefix(Protocol.HTTPS, "magiclen.org", 8100, "url-prefix")
    'https://magiclen.org:8100/url-prefix'
"""

__version__ = "0.1.0"

# Core
from .models import Protocol
from .prefix import create_prefix

# Configuration
from .config import PrefixConfig, resolve_protocol

# Validated host / URL adapters
from .validated import (
    ValidatedHost,
    ValidatedUrl,
    create_prefix_with_validated_domain,
    create_prefix_with_validated_host,
    create_prefix_with_validated_http_ftp_url,
    create_prefix_with_validated_http_url,
    create_prefix_with_validated_ipv4,
    create_prefix_with_validated_ipv6,
)

# Exceptions
from .exceptions import InvalidPortError, UnknownProtocolError, UrlPrefixError

__all__ = [
    # Version
    "__version__",
    # Core
    "Protocol",
    "create_prefix",
    # Configuration
    "PrefixConfig",
    "resolve_protocol",
    # Adapters
    "ValidatedHost",
    "ValidatedUrl",
    "create_prefix_with_validated_domain",
    "create_prefix_with_validated_host",
    "create_prefix_with_validated_http_ftp_url",
    "create_prefix_with_validated_http_url",
    "create_prefix_with_validated_ipv4",
    "create_prefix_with_validated_ipv6",
    # Exceptions
    "InvalidPortError",
    "UnknownProtocolError",
    "UrlPrefixError",
]
