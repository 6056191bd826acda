import socket

import pytest

from zerod.sockutil import set_nonblocking, set_socket_option


@pytest.fixture
def tcp_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    yield sock
    sock.close()


def test_set_option_on(tcp_socket):
    assert tcp_socket.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) == 0
    set_socket_option(tcp_socket, socket.SO_REUSEADDR, 1)
    value = tcp_socket.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR)
    assert value in (1, socket.SO_REUSEADDR)


def test_set_option_off(tcp_socket):
    set_socket_option(tcp_socket, socket.SO_REUSEADDR, 1)
    set_socket_option(tcp_socket, socket.SO_REUSEADDR, 0)
    assert tcp_socket.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) == 0


def test_set_option_on_closed_socket_raises(capsys):
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.close()
    with pytest.raises(OSError):
        set_socket_option(sock, socket.SO_REUSEADDR, 1)
    assert "setsockopt" in capsys.readouterr().err


def test_set_nonblocking(tcp_socket):
    assert tcp_socket.getblocking() is True
    set_nonblocking(tcp_socket)
    assert tcp_socket.getblocking() is False


def test_set_nonblocking_on_closed_socket_raises():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.close()
    with pytest.raises(OSError):
        set_nonblocking(sock)