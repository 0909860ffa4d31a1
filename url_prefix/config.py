# SPDX-FileCopyrightText: 2026 ArcheBase
#
# SPDX-License-Identifier: MulanPSL-2.0

"""
Prefix configuration record, e.g. loaded from an application's settings.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .exceptions import UnknownProtocolError
from .models import Protocol
from .prefix import create_prefix
from .utils import is_valid_port

logger = logging.getLogger(__name__)


def resolve_protocol(value: Union[str, Protocol], default_port: Optional[int] = None) -> Protocol:
    """
    Resolve a protocol name, falling back to a custom protocol

    Args:
        value: Protocol name or Protocol instance
        default_port: Default port used if value is not a built-in name

    Raises:
        UnknownProtocolError: If value is unknown and no default_port is given
    """
    if isinstance(value, Protocol):
        return value

    protocol = Protocol.from_name(value)
    if protocol is not None:
        return protocol

    if default_port is None:
        raise UnknownProtocolError(value)

    logger.debug(f"Protocol '{value}' is not built in, using custom default port {default_port}")
    return Protocol.custom(value, default_port)


@dataclass
class PrefixConfig:
    """
    Settings for one URL prefix

    Fields:
        protocol: URL protocol
        host: Host text (used as-is)
        port: Port number, omitted from the prefix when it is the default
        path: Path appended after the host
    """

    protocol: Protocol
    host: str
    port: Optional[int] = None
    path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {
            "protocol": self.protocol.name,
            "host": self.host,
            "port": self.port,
            "path": self.path,
        }
        if self.protocol.is_custom:
            data["default_port"] = self.protocol.default_port
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrefixConfig":
        """
        Create from dictionary

        Raises:
            ValueError: If host is missing or protocol is not a name
            UnknownProtocolError: If protocol is unknown and no default_port is given
        """
        if "host" not in data:
            raise ValueError("Invalid prefix config: host is required")

        name = data.get("protocol", "http")
        if not isinstance(name, (str, Protocol)):
            raise ValueError(f"Invalid prefix config: protocol must be a name, got {name!r}")

        protocol = resolve_protocol(name, data.get("default_port"))
        return cls(
            protocol=protocol,
            host=data["host"],
            port=data.get("port"),
            path=data.get("path"),
        )

    def validate(self) -> bool:
        """Validate host and port"""
        if not self.host:
            return False
        return self.port is None or is_valid_port(self.port)

    def build(self) -> str:
        """Create the URL prefix string"""
        return create_prefix(self.protocol, self.host, self.port, self.path)

    def __str__(self) -> str:
        return self.build()
