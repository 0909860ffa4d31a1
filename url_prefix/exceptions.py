# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Exception hierarchy for url_prefix.

create_prefix() itself never raises; these are only used by the
configuration layer and the validated-URL adapters.
"""


class UrlPrefixError(Exception):
    """Base exception for all url_prefix errors"""

    pass


class UnknownProtocolError(UrlPrefixError):
    """
    Protocol name is not in the built-in table and no default port was given

    Attributes:
        name: The protocol name that could not be resolved
    """

    def __init__(self, name: str, message: str = None):
        self.name = name
        msg = message or f"Unknown protocol '{name}'"
        super().__init__(msg)


class InvalidPortError(UrlPrefixError):
    """Port number outside 0..65535"""

    def __init__(self, port: int):
        self.port = port
        super().__init__(f"Invalid port number: {port}")
