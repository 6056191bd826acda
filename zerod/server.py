"""A non-blocking TCP listener driven by a selector event loop."""

from __future__ import annotations

import enum
import selectors
import socket

from zerod.connection import Connection, ConnectionStatus
from zerod.log import log_debug, log_error
from zerod.sockutil import set_nonblocking, set_socket_option

SERVER_BACKLOG = 1024
SERVER_MAX_EVENTS = 10

_REUSE_OPTION = getattr(socket, "SO_REUSEPORT", socket.SO_REUSEADDR)


class ServerStatus(enum.IntEnum):
    OK = 0
    ERROR_OS = 1
    ERROR_EVENTLOOP = 2


class ServerError(Exception):
    """Raised when setting up or running the server fails."""

    def __init__(self, status: ServerStatus, message: str) -> None:
        super().__init__(message)
        self.status = status


class Server:
    """Listens on a port and accepts connections as they arrive."""

    def __init__(self, port: str, address_family: int = socket.AF_INET) -> None:
        self.port_str = str(port)
        self.address_family = address_family
        self.status = ServerStatus.OK
        self.sock: socket.socket | None = None
        self.sockaddr = None
        self.address_str = ""
        self.selector: selectors.BaseSelector | None = None
        self.connections: list[Connection] = []

    @property
    def port(self) -> int | None:
        """The port actually bound, or None before binding."""
        if self.sock is None:
            return None
        return self.sock.getsockname()[1]

    def _fail(self, fmt: str, *args) -> ServerError:
        log_error(fmt, *args)
        self.status = ServerStatus.ERROR_OS
        return ServerError(self.status, fmt % args)

    def _setup_getaddrinfo(self) -> None:
        try:
            results = socket.getaddrinfo(
                None, self.port_str, self.address_family,
                socket.SOCK_STREAM, 0, socket.AI_PASSIVE,
            )
        except socket.gaierror as exc:
            raise self._fail("getaddrinfo failed: %s", exc.strerror or exc) from exc
        except OSError as exc:
            raise self._fail(
                "getaddrinfo failed, system error: %s", exc.strerror or exc
            ) from exc
        if not results:
            raise self._fail("getaddrinfo failed, no results")
        self.sockaddr = results[0][4]
        self.address_str = self.sockaddr[0]

    def _setup_socket(self) -> None:
        try:
            self.sock = socket.socket(self.address_family, socket.SOCK_STREAM)
        except OSError as exc:
            raise self._fail("Failed to obtain socket: %s", exc.strerror or exc) from exc
        log_debug(
            "Obtained socket file descriptor %d for %s:%s",
            self.sock.fileno(), self.address_str, self.port_str,
        )
        try:
            set_socket_option(self.sock, _REUSE_OPTION, 1)
            set_nonblocking(self.sock)
        except OSError as exc:
            self.status = ServerStatus.ERROR_OS
            raise ServerError(self.status, str(exc)) from exc

    def _setup_bind(self) -> None:
        try:
            self.sock.bind(self.sockaddr)
        except OSError as exc:
            raise self._fail(
                "Bind to %s:%s failed: %s",
                self.address_str, self.port_str, exc.strerror or exc,
            ) from exc
        log_debug(
            "Bind sockfd %d to %s:%s succeeded",
            self.sock.fileno(), self.address_str, self.port_str,
        )

    def _setup_listen(self) -> None:
        try:
            self.sock.listen(0)
        except OSError as exc:
            raise self._fail("Listen failed") from exc
        log_debug("Listening on %s:%s", self.address_str, self.port_str)

    def _setup_selector(self) -> None:
        try:
            self.selector = selectors.DefaultSelector()
            self.selector.register(self.sock, selectors.EVENT_READ)
        except OSError as exc:
            raise self._fail(
                "Failed to setup event polling: %s", exc.strerror or exc
            ) from exc
        log_debug("Setup event polling on listening socket %d", self.sock.fileno())

    def setup(self) -> None:
        """Resolve, create, bind and listen; raises ServerError on failure."""
        try:
            self._setup_getaddrinfo()
            self._setup_socket()
            self._setup_bind()
            self._setup_listen()
            self._setup_selector()
        except ServerError:
            self.cleanup()
            raise

    def accept_new_connection(self) -> Connection | None:
        """Accept one pending client, or return None when none is waiting."""
        try:
            client, address = self.sock.accept()
        except (BlockingIOError, InterruptedError):
            return None
        conn = Connection(client, address)
        self.connections.append(conn)
        log_debug("created new connection, fd = %d", conn.fileno)
        return conn

    def poll_once(self, timeout: float | None = None) -> int:
        """Wait for events, handle them, and return how many arrived."""
        if self.selector is None:
            raise RuntimeError("server is not set up")
        log_debug("EventLoop: Trying to pull events")
        try:
            events = self.selector.select(timeout)
        except (OSError, ValueError) as exc:
            log_error("Can't pull events: %s", exc)
            self.status = ServerStatus.ERROR_EVENTLOOP
            raise ServerError(self.status, f"Can't pull events: {exc}") from exc
        events = events[:SERVER_MAX_EVENTS]
        log_debug("EventLoop: %d events pulled", len(events))
        for index, (key, _mask) in enumerate(events):
            log_debug("Processing event #%d", index)
            if key.fileobj is self.sock:
                log_debug("\t> got event on listening socket! should accept")
                self.accept_new_connection()
        return len(events)

    def event_loop(self) -> None:
        """Handle events until the server leaves the OK state."""
        log_debug("Starting server event loop")
        while self.status is ServerStatus.OK:
            self.poll_once(None)

    def cleanup(self) -> None:
        """Close every active connection, the selector and the listener."""
        for index, conn in enumerate(self.connections):
            if conn.status is ConnectionStatus.ACTIVE:
                log_debug("cleanup: close connection %d (fd %d)", index, conn.fileno)
                conn.close()
        self.connections.clear()
        if self.selector is not None:
            self.selector.close()
            self.selector = None
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> Server:
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()


def serve(port: str = "8080", address_family: int = socket.AF_INET) -> ServerStatus:
    """Run a server until it fails and return its final status."""
    server = Server(port, address_family)
    try:
        with server:
            server.event_loop()
    except ServerError:
        pass
    return server.status