from webserv.config import Config
from webserv.server import Server


def test_default_is_empty():
    config = Config()
    assert config.servers == []


def test_add_server():
    config = Config()
    config.add_server(Server())
    assert len(config.servers) == 1


def test_get_servers_reference():
    config = Config()
    config.add_server(Server())
    ref = config.servers
    assert ref is config.servers


def test_servers_keep_insertion_order():
    config = Config()
    first = Server(port=8080)
    second = Server(port=9090)
    config.add_server(first)
    config.add_server(second)
    assert [server.port for server in config.servers] == [8080, 9090]


def test_initial_servers_are_copied():
    initial = [Server()]
    config = Config(initial)
    config.add_server(Server(port=8080))
    assert len(initial) == 1
    assert len(config.servers) == 2