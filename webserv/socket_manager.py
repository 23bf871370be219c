"""Listening sockets and the event loop that serves clients."""

from __future__ import annotations

import selectors
import socket
from collections.abc import Iterable

from webserv.server import Server

SUCCESS_BODY = "<h1>Success</h1><p>OK</p>"
_RECV_SIZE = 1023

_WAKE = "wake"
_LISTEN = "listen"
_CLIENT = "client"


class SocketError(Exception):
    """Raised when a listening socket cannot be set up or polled."""


def build_response(body: str = SUCCESS_BODY) -> bytes:
    """Build a complete HTTP/1.1 200 response that closes the connection."""
    payload = body.encode()
    head = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/html\r\n"
        f"Content-Length: {len(payload)}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return head.encode() + payload


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class SocketManager:
    """Listens on every configured server and answers each request once."""

    def __init__(self, servers: Iterable[Server]) -> None:
        self._selector = selectors.DefaultSelector()
        self._listeners: list[socket.socket] = []
        self._running = True
        self._closed = False
        self._wake_recv, self._wake_send = socket.socketpair()
        self._wake_recv.setblocking(False)
        self._selector.register(self._wake_recv, selectors.EVENT_READ, (_WAKE, None))
        try:
            for server in servers:
                self._listen(server)
        except BaseException:
            self.close()
            raise

    def _listen(self, server: Server) -> None:
        host = "127.0.0.1" if server.host == "localhost" else server.host
        where = f"{server.host}:{server.port}"
        try:
            socket.inet_aton(host)
        except OSError as exc:
            raise SocketError(f"bind() failed on {where}: invalid address") from exc
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise SocketError(f"socket() failed: {_reason(exc)}") from exc
        try:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as exc:
                raise SocketError(f"setsockopt() failed: {_reason(exc)}") from exc
            sock.setblocking(False)
            try:
                sock.bind((host, server.port))
            except OSError as exc:
                raise SocketError(f"bind() failed on {where}: {_reason(exc)}") from exc
            try:
                sock.listen(socket.SOMAXCONN)
            except OSError as exc:
                raise SocketError(f"listen() failed: {_reason(exc)}") from exc
        except SocketError:
            sock.close()
            raise
        self._selector.register(sock, selectors.EVENT_READ, (_LISTEN, server))
        self._listeners.append(sock)
        print(f"Listening on {server.host}:{server.port}")

    def addresses(self) -> list[tuple[str, int]]:
        """Actual (host, port) of every open listening socket."""
        return [sock.getsockname() for sock in self._listeners]

    def run(self) -> None:
        """Serve clients until stop() is called or the process is interrupted."""
        if self._closed:
            raise SocketError("socket manager is closed")
        try:
            while self._running:
                try:
                    events = self._selector.select()
                except OSError as exc:
                    raise SocketError(f"poll() failed: {_reason(exc)}") from exc
                for key, _ in events:
                    kind, server = key.data
                    if kind == _WAKE:
                        self._drain_wakeup()
                    elif kind == _LISTEN:
                        self._accept(key.fileobj, server)
                    else:
                        self._serve(key.fileobj)
        except KeyboardInterrupt:
            self._running = False
        print()
        print("Shutting down server")

    def _drain_wakeup(self) -> None:
        try:
            while self._wake_recv.recv(64):
                pass
        except OSError:
            pass

    def _accept(self, listener: socket.socket, server: Server) -> None:
        try:
            client, _ = listener.accept()
        except OSError:
            return
        try:
            client.setblocking(False)
        except OSError:
            client.close()
            return
        self._selector.register(client, selectors.EVENT_READ, (_CLIENT, server))
        print()
        print(f"Accepted client on fd: {client.fileno()}")

    def _serve(self, client: socket.socket) -> None:
        try:
            data = client.recv(_RECV_SIZE)
        except BlockingIOError:
            return
        except OSError:
            data = b""
        if data:
            request = data.split(b"\0", 1)[0].decode(errors="replace")
            print()
            print(f"Received request: {request}")
            print()
            try:
                client.sendall(build_response())
            except OSError:
                pass
        self._drop(client)

    def _drop(self, client: socket.socket) -> None:
        self._selector.unregister(client)
        client.close()

    def stop(self) -> None:
        """Ask a running loop to finish; safe to call from another thread."""
        self._running = False
        try:
            self._wake_send.send(b"\0")
        except OSError:
            pass

    def close(self) -> None:
        """Close every socket the manager owns. Calling it twice is harmless."""
        if self._closed:
            return
        self._closed = True
        self._running = False
        for key in list(self._selector.get_map().values()):
            self._selector.unregister(key.fileobj)
            key.fileobj.close()
        self._selector.close()
        self._wake_send.close()
        self._listeners.clear()

    def __enter__(self) -> SocketManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()