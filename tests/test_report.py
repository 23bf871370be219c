from webserv.config import Config
from webserv.location import Location
from webserv.report import format_config, print_config, print_usage, usage_text
from webserv.server import Server


def _config_with(location: Location) -> Config:
    server = Server()
    server.add_location(location)
    return Config([server])


def test_usage_text_contents():
    text = usage_text()
    assert text.startswith("\n=========USAGE=========\n")
    assert "  ./webserv            # Uses default.conf\n" in text
    assert text.endswith("  ./webserv config.conf\n")


def test_print_usage_writes_usage_text(capsys):
    print_usage()
    assert capsys.readouterr().out == usage_text()


def test_empty_config_renders_nothing():
    assert format_config(Config()) == ""


def test_server_header_and_body_size():
    server = Server(host="127.0.0.1", port=8080, client_max_body_size=4096)
    server.add_server_name("example.com")
    lines = format_config(Config([server])).splitlines()
    assert lines[0] == "Server 1: 127.0.0.1:8080"
    assert lines[1] == "  server_name: example.com"
    assert lines[2] == "  client_max_body_size: 4096"


def test_servers_are_numbered_in_order():
    config = Config([Server(port=8080), Server(port=9090)])
    headers = [line for line in format_config(config).splitlines() if line.startswith("Server ")]
    assert len(headers) == 2
    assert headers[0].endswith(":8080")
    assert headers[1].endswith(":9090")


def test_error_pages_sorted_by_code():
    server = Server()
    server.set_error_page(500, "/errors/500.html")
    server.set_error_page(404, "/errors/404.html")
    lines = [line for line in format_config(Config([server])).splitlines() if "error_page" in line]
    assert lines == ["  error_page 404: /errors/404.html", "  error_page 500: /errors/500.html"]


def test_location_block_lines():
    location = Location(path="/", root="/var/www/html", index="index.html")
    location.add_method("POST")
    location.add_method("GET")
    lines = format_config(_config_with(location)).splitlines()
    assert "  location /:" in lines
    assert "      root: /var/www/html" in lines
    assert "      index: index.html" in lines
    assert "      autoindex: off" in lines
    assert "    methods: GET POST " in lines


def test_no_methods_marked_none():
    lines = format_config(_config_with(Location(path="/"))).splitlines()
    assert "    methods: (none)" in lines


def test_autoindex_on():
    lines = format_config(_config_with(Location(path="/", autoindex=True))).splitlines()
    assert "      autoindex: on" in lines


def test_redirect_with_and_without_code():
    with_code = Location(path="/old")
    with_code.set_redirect("/new", 302)
    assert "    redirect: /new (code 302)" in format_config(_config_with(with_code)).splitlines()

    without_code = Location(path="/old", redirect="/new")
    assert "    redirect: /new" in format_config(_config_with(without_code)).splitlines()


def test_optional_lines_only_when_set():
    plain = format_config(_config_with(Location(path="/")))
    assert "redirect" not in plain
    assert "upload_store" not in plain
    assert "cgi_pass" not in plain

    full = Location(path="/cgi", upload_store="/var/www/uploads", cgi_extension=".php")
    lines = format_config(_config_with(full)).splitlines()
    assert "    upload_store: /var/www/uploads" in lines
    assert "    cgi_pass: .php" in lines


def test_print_config_matches_format(capsys):
    config = _config_with(Location(path="/uploads", upload_store="/tmp/up"))
    print_config(config)
    assert capsys.readouterr().out == format_config(config)