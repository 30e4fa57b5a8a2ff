"""Startup configuration for the remote service."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from remote_service.errors import StartupFailure

SERVER_PORT_KEY = "server.port"

# The service always listens on this port; it is not read from the
# environment, files or command-line arguments.
DEFAULT_SERVER_PORT = "8083"


@dataclass(frozen=True)
class StartupConfig:
    """Key-value overrides handed to the application before it serves requests."""

    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Copy and freeze so later changes to the caller's dict are not seen
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def default(cls) -> "StartupConfig":
        """Create the configuration used at process start."""
        return cls(properties={SERVER_PORT_KEY: DEFAULT_SERVER_PORT})

    def validate(self) -> None:
        """
        Check the configuration can start an application.

        Raises:
            StartupFailure: If the properties are empty, lack the port
                override, or the port is not a valid TCP port.
        """
        if not self.properties:
            raise StartupFailure("Startup configuration must not be empty")
        if SERVER_PORT_KEY not in self.properties:
            raise StartupFailure(f"Startup configuration is missing '{SERVER_PORT_KEY}'")
        # Parsing raises on bad values
        _ = self.port

    @property
    def port(self) -> int:
        """The listening port parsed from the ``server.port`` entry."""
        raw = self.properties.get(SERVER_PORT_KEY)
        try:
            port = int(raw)
        except (TypeError, ValueError) as e:
            raise StartupFailure(f"Invalid value for '{SERVER_PORT_KEY}': {raw!r}") from e

        if not 0 < port < 65536:
            raise StartupFailure(f"'{SERVER_PORT_KEY}' out of range: {port}")
        return port
