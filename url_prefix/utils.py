# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Utility functions for building URL prefixes.
"""

MAX_PORT = 65535


def concat_with_slash(prefix: str, path: str) -> str:
    """Join prefix and path with exactly one slash between them"""
    if prefix.endswith("/"):
        if path.startswith("/"):
            return prefix + path[1:]
        return prefix + path
    if path.startswith("/"):
        return prefix + path
    return f"{prefix}/{path}"


def bracket_ipv6(host: str) -> str:
    """Wrap an IPv6 literal in brackets (no-op if already bracketed)"""
    if host.startswith("["):
        return host
    return f"[{host}]"


def is_valid_port(port: int) -> bool:
    return 0 <= port <= MAX_PORT
