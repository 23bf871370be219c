"""Top-level container for the parsed server configuration."""

from __future__ import annotations

from collections.abc import Iterable

from webserv.server import Server


class Config:
    """Holds every configured server block (virtual host)."""

    def __init__(self, servers: Iterable[Server] = ()) -> None:
        self._servers: list[Server] = list(servers)

    def add_server(self, server: Server) -> None:
        """Append a fully initialised server block."""
        self._servers.append(server)

    @property
    def servers(self) -> list[Server]:
        """The configured servers, in the order they were added."""
        return self._servers

    def __repr__(self) -> str:
        return f"Config(servers={self._servers!r})"