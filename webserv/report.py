"""Human-readable output: usage text and configuration summaries."""

from __future__ import annotations

import sys

from webserv.config import Config
from webserv.location import Location

_USAGE = (
    "\n=========USAGE=========\n"
    "  ./webserv            # Uses default.conf\n"
    "  ./webserv config.conf\n"
)


def usage_text() -> str:
    """Return the command-line usage message."""
    return _USAGE


def _location_lines(location: Location) -> list[str]:
    lines = [
        f"  location {location.path}:",
        f"      root: {location.root}",
        f"      index: {location.index}",
        f"      autoindex: {'on' if location.autoindex else 'off'}",
    ]
    if location.methods:
        methods = "".join(f"{method} " for method in sorted(location.methods))
    else:
        methods = "(none)"
    lines.append(f"    methods: {methods}")
    if location.has_redirect():
        redirect = f"    redirect: {location.redirect}"
        if location.return_code:
            redirect += f" (code {location.return_code})"
        lines.append(redirect)
    if location.is_upload_enabled():
        lines.append(f"    upload_store: {location.upload_store}")
    if location.cgi_extension:
        lines.append(f"    cgi_pass: {location.cgi_extension}")
    return lines


def format_config(config: Config) -> str:
    """Render every server block of ``config`` as text, one line per setting."""
    lines: list[str] = []
    for number, server in enumerate(config.servers, start=1):
        lines.append(f"Server {number}: {server.host}:{server.port}")
        lines.extend(f"  server_name: {name}" for name in server.server_names)
        lines.extend(
            f"  error_page {code}: {path}" for code, path in sorted(server.error_pages.items())
        )
        lines.append(f"  client_max_body_size: {server.client_max_body_size}")
        for location in server.locations:
            lines.extend(_location_lines(location))
    return "".join(line + "\n" for line in lines)


def print_usage() -> None:
    sys.stdout.write(usage_text())


def print_config(config: Config) -> None:
    sys.stdout.write(format_config(config))