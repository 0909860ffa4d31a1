# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Protocol table for URL prefixes.

Built-in protocols are fixed (name, default port) rows. Any other scheme
can be expressed with Protocol.custom().
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .exceptions import InvalidPortError, UnknownProtocolError
from .utils import is_valid_port

# (name, default port) rows of the built-in protocols
_TABLE: Tuple[Tuple[str, int], ...] = (
    ("http", 80),
    ("https", 443),
    ("ftp", 21),
    ("ws", 80),
    ("wss", 443),
)


@dataclass(frozen=True)
class Protocol:
    """
    URL protocol (scheme) with its default port

    Fields:
        name: Scheme name emitted before "://"
        default_port: Port that is omitted from generated prefixes
        is_custom: True for caller-defined protocols (see Protocol.custom)

    Example:
        >>> Protocol.HTTPS.default_port
        443
        >>> Protocol.from_name("HTTP") == Protocol.HTTP
        True
        >>> Protocol.custom("gopher", 70).name
        'gopher'
    """

    name: str
    default_port: int
    is_custom: bool = False

    HTTP: ClassVar["Protocol"]
    HTTPS: ClassVar["Protocol"]
    FTP: ClassVar["Protocol"]
    WS: ClassVar["Protocol"]
    WSS: ClassVar["Protocol"]

    def __post_init__(self) -> None:
        if not is_valid_port(self.default_port):
            raise InvalidPortError(self.default_port)
        if not self.is_custom and (self.name, self.default_port) not in _TABLE:
            raise UnknownProtocolError(
                self.name,
                f"'{self.name}' with port {self.default_port} is not a built-in protocol, "
                "use Protocol.custom()",
            )

    @classmethod
    def custom(cls, name: str, default_port: int) -> "Protocol":
        """Create a caller-defined protocol (name is kept as given)"""
        return cls(name=name, default_port=default_port, is_custom=True)

    @classmethod
    def builtins(cls) -> Tuple["Protocol", ...]:
        """Built-in protocols in table order"""
        return _BUILTINS

    @classmethod
    def from_name(cls, value: str) -> Optional["Protocol"]:
        """Look up a built-in protocol by name, ignoring case"""
        lowered = value.lower()
        for protocol in _BUILTINS:
            if protocol.name == lowered:
                return protocol
        return None

    def __str__(self) -> str:
        return self.name


_BUILTINS: Tuple[Protocol, ...] = tuple(Protocol(name, port) for name, port in _TABLE)

Protocol.HTTP, Protocol.HTTPS, Protocol.FTP, Protocol.WS, Protocol.WSS = _BUILTINS
