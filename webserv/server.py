"""Virtual server configuration and host resolution."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from webserv.location import Location

DEFAULT_PORT = 80
DEFAULT_HOST = "0.0.0.0"
DEFAULT_CLIENT_MAX_BODY_SIZE = 1048576


class NoMatchingServerError(RuntimeError):
    """Raised when no server listens on the requested port."""


@dataclass
class Server:
    """One configured server block."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    server_names: list[str] = field(default_factory=list)
    error_pages: dict[int, str] = field(default_factory=dict)
    client_max_body_size: int = DEFAULT_CLIENT_MAX_BODY_SIZE
    locations: list[Location] = field(default_factory=list)

    def add_server_name(self, name: str) -> None:
        self.server_names.append(name)

    def set_error_page(self, code: int, path: str) -> None:
        self.error_pages[code] = path

    def add_location(self, location: Location) -> None:
        self.locations.append(location)

    def has_server_name(self, name: str) -> bool:
        """Return True if ``name`` is one of this server's names."""
        return name in self.server_names


def find_matching_server(servers: Iterable[Server], port: int, host_name: str) -> Server:
    """Pick the server for ``port`` whose name matches ``host_name``.

    Falls back to the first server on that port; raises
    NoMatchingServerError if none listens there.
    """
    on_port = [server for server in servers if server.port == port]
    for server in on_port:
        if server.has_server_name(host_name):
            return server
    if on_port:
        return on_port[0]
    raise NoMatchingServerError(f"No matching server found for port {port}")