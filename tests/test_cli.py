from webserv.cli import build_default_config, main
from webserv.report import format_config, usage_text


def test_too_many_arguments_prints_usage(capsys):
    assert main(["one.conf", "two.conf"]) == 0
    assert capsys.readouterr().out == usage_text()


def test_default_server_settings():
    config = build_default_config()
    assert len(config.servers) == 1
    server = config.servers[0]
    assert server.host == "127.0.0.1"
    assert server.port == 8080
    assert server.client_max_body_size == 1000000
    assert server.has_server_name("example.com")
    assert server.error_pages == {404: "/errors/404.html"}


def test_default_locations():
    root, uploads = build_default_config().servers[0].locations
    assert root.path == "/"
    assert root.effective_index_path() == "/var/www/html/index.html"
    assert root.is_method_allowed("GET")
    assert root.is_method_allowed("POST")
    assert not root.autoindex
    assert uploads.path == "/uploads"
    assert uploads.autoindex
    assert uploads.is_upload_enabled()
    assert not uploads.is_method_allowed("GET")


def test_default_config_report():
    lines = format_config(build_default_config()).splitlines()
    assert "  error_page 404: /errors/404.html" in lines
    assert "    upload_store: /var/www/uploads" in lines
    assert "    methods: GET POST " in lines


def test_each_call_builds_fresh_config():
    first = build_default_config()
    first.servers[0].add_server_name("other.example.com")
    second = build_default_config()
    assert second.servers[0].server_names == ["example.com"]