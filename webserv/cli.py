"""Command-line entry point for the web server."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from webserv.config import Config
from webserv.location import Location
from webserv.report import print_config, print_usage
from webserv.server import Server
from webserv.socket_manager import SocketManager

DEFAULT_CONFIG_FILE = "./configs/default.conf"


def build_default_config() -> Config:
    """The built-in configuration used until configuration files are parsed."""
    server = Server(host="127.0.0.1", port=8080, client_max_body_size=1000000)
    server.add_server_name("example.com")
    server.set_error_page(404, "/errors/404.html")

    root = Location(path="/", root="/var/www/html", autoindex=False, index="index.html")
    root.add_method("GET")
    root.add_method("POST")
    server.add_location(root)

    uploads = Location(
        path="/uploads",
        root="/var/www/uploads",
        autoindex=True,
        upload_store="/var/www/uploads",
    )
    uploads.add_method("POST")
    server.add_location(uploads)

    return Config([server])


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print_usage()
        return 0
    # The configuration file is accepted but not read yet.
    config_file = args[0] if args else DEFAULT_CONFIG_FILE
    del config_file

    try:
        config = build_default_config()
        print_config(config)
        with SocketManager(config.servers) as manager:
            manager.run()
    except Exception as exc:
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())