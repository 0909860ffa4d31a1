#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Basic URL prefix example.

This example demonstrates:
1. Building prefixes with built-in protocols
2. Default port elision
3. Looking up a protocol by name with a custom fallback
4. Loading a prefix from settings
5. Using validated IP addresses
"""

import sys
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from url_prefix import (
    PrefixConfig,
    Protocol,
    UrlPrefixError,
    create_prefix,
    create_prefix_with_validated_ipv4,
    create_prefix_with_validated_ipv6,
)


def main():
    print("Built-in protocols:")
    for protocol in Protocol.builtins():
        print(f"  {protocol.name:<6} default port {protocol.default_port}")

    print("\nPrefixes:")
    print(f"  {create_prefix(Protocol.HTTPS, 'magiclen.org')}")
    print(f"  {create_prefix(Protocol.HTTPS, 'magiclen.org', 8100, 'url-prefix')}")
    # Default port is left out
    print(f"  {create_prefix(Protocol.HTTP, 'magiclen.org', 80, '/url-prefix')}")

    # Unknown names return None, fall back to a custom protocol
    name = "gopher"
    protocol = Protocol.from_name(name) or Protocol.custom(name, 70)
    print(f"  {create_prefix(protocol, 'gopher.example.org', 7070)}")

    print("\nFrom settings:")
    settings = [
        {"protocol": "HTTPS", "host": "api.example.com", "port": 443, "path": "v1"},
        {"protocol": "redis", "host": "cache.local", "port": 6380, "default_port": 6379},
        {"protocol": "smtp", "host": "mail.local"},
    ]
    for entry in settings:
        try:
            config = PrefixConfig.from_dict(entry)
        except UrlPrefixError as e:
            print(f"  ERROR: {e}")
            continue
        print(f"  {config.build()}")

    print("\nValidated addresses:")
    print(f"  {create_prefix_with_validated_ipv4(Protocol.HTTP, IPv4Address('127.0.0.1'), 'health')}")
    print(f"  {create_prefix_with_validated_ipv6(Protocol.WSS, IPv6Address('::1'), 'stream')}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
