# webserv

A small HTTP server that runs on a single event loop. It opens a listening
socket for each configured server block and accepts clients without blocking.
It answers every request with the same fixed HTML page and then closes the
connection.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
webserv                 # default configuration file name: ./configs/default.conf
webserv config.conf     # names a configuration file
```

With more than one argument, the command prints the usage text and exits with
status 0.

On start-up the server prints its configuration. It then prints
`Listening on host:port` for each server block. Each request it receives is
printed and answered with this response:

```
HTTP/1.1 200 OK
Content-Type: text/html
Content-Length: 25
Connection: close

<h1>Success</h1><p>OK</p>
```

Press Ctrl+C to shut the server down. It then prints `Shutting down server`.
If an error occurs during start-up, such as an address already in use, the
command prints `Unexpected error: ...` to standard error and exits with
status 1.

## What it does not do

- **Configuration files are not read.** The file name is accepted on the
  command line, but the server always runs the built-in configuration from
  `webserv.cli.build_default_config()`. That configuration listens on
  `127.0.0.1:8080` with the server name `example.com` and has two locations,
  `/` and `/uploads`.
- **Requests are not routed.** Every request gets the fixed page above. This
  includes requests that name a location, method, error page, CGI extension
  or upload store. No files are served, no CGI scripts run and no uploads are
  stored.

## Using the library

`Location` and `Server` are dataclasses, and `Config` holds a list of servers.

```python
from webserv.config import Config
from webserv.location import Location
from webserv.server import Server, find_matching_server
from webserv.report import format_config

static = Location(path="/static", root="/var/www")
static.add_method("GET")

server = Server(port=8080)
server.add_server_name("example.com")
server.set_error_page(404, "/errors/404.html")
server.add_location(static)

config = Config()
config.add_server(server)

print(format_config(config))

chosen = find_matching_server(config.servers, 8080, "example.com")
print(chosen.locations[0].resolve_absolute_path("/static/logo.png"))  # /var/www/logo.png
```

### Servers

`Server` defaults to port `80`, host `0.0.0.0` and a `client_max_body_size`
of 1048576 bytes. `has_server_name(name)` checks the server's names.

`find_matching_server(servers, port, host_name)` returns the server on `port`
whose names include `host_name`. If no name matches, it returns the first
server on that port. If no server listens on that port, it raises
`NoMatchingServerError`, a subclass of `RuntimeError`.

### Locations

`Location` offers these checks:

- `matches_path(uri)` does a plain prefix match.
- `resolve_absolute_path(uri)` replaces the matched prefix with `root`. It
  returns `""` when the URI does not match.
- `is_method_allowed(method)` checks the allowed methods.
- `is_cgi_request(uri)` checks whether the URI ends with `cgi_extension`.
- `is_upload_enabled()` is true when `upload_store` is set.
- `has_redirect()` is true when a redirect target is set.
- `effective_index_path()` returns `root + "/" + index`, or `""` when no
  index is set.

`set_redirect(target, code)` sets the redirect target and status code.

### Reports

`webserv.report` provides two text builders:

- `usage_text()` returns the usage message.
- `format_config(config)` returns the configuration summary.

`print_usage()` and `print_config(config)` write that text to standard
output.

### Serving programmatically

`webserv.socket_manager.SocketManager` takes an iterable of `Server` objects
and binds a listening socket for each one. The host `localhost` is bound as
`127.0.0.1`. If set-up fails, it raises `SocketError`.

Use it as a context manager. `run()` serves clients until `stop()` is called,
which is safe to do from another thread, or until the process is interrupted.
`addresses()` returns the actual bound `(host, port)` pairs, which is useful
with port `0`. On exit all sockets are closed; `close()` can also be called
directly.

`build_response(body)` builds the `200 OK` response the server sends.