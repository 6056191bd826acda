"""Small helpers for configuring sockets."""

from __future__ import annotations

import socket

from zerod.log import log_debug, log_error


def set_socket_option(sock: socket.socket, optname: int, optval: int) -> None:
    """Set a SOL_SOCKET option; logs and re-raises OSError on failure."""
    try:
        sock.setsockopt(socket.SOL_SOCKET, optname, optval)
    except OSError as exc:
        log_error(
            "setsockopt(fd: %d, optname: %d, optval: %d) failed - %s",
            sock.fileno(), optname, optval, exc.strerror or exc,
        )
        raise
    log_debug("setsockopt(fd: %d, optname: %d) to %d", sock.fileno(), optname, optval)


def set_nonblocking(sock: socket.socket) -> None:
    """Switch the socket to non-blocking mode; logs and re-raises OSError."""
    fd = sock.fileno()
    try:
        sock.setblocking(False)
    except OSError as exc:
        log_error("set non-blocking on socket %d failed: %s", fd, exc.strerror or exc)
        raise
    log_debug("set_nonblocking(%d)", fd)