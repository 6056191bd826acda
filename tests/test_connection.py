import socket

import pytest

from zerod.connection import Connection, ConnectionStatus


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_new_connection_is_active(pair):
    a, _ = pair
    conn = Connection(a, "peer")
    assert conn.status is ConnectionStatus.ACTIVE
    assert conn.fileno == a.fileno()


def test_close_closes_socket(pair):
    a, _ = pair
    conn = Connection(a, "peer")
    conn.close()
    assert conn.status is ConnectionStatus.CLOSED
    assert a.fileno() == -1


def test_close_twice_stays_closed(pair):
    a, _ = pair
    conn = Connection(a, "peer")
    conn.close()
    conn.close()
    assert conn.status is ConnectionStatus.CLOSED


def test_status_values_follow_lifecycle(pair):
    a, _ = pair
    conn = Connection(a, "peer")
    assert conn.status.value == 0
    conn.close()
    assert conn.status.value == 1