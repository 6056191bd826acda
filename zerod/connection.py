"""An accepted client connection."""

from __future__ import annotations

import enum
import socket
from dataclasses import dataclass
from typing import Any


class ConnectionStatus(enum.IntEnum):
    ACTIVE = 0
    CLOSED = 1


@dataclass
class Connection:
    sock: socket.socket
    address: Any
    status: ConnectionStatus = ConnectionStatus.ACTIVE

    @property
    def fileno(self) -> int:
        return self.sock.fileno()

    def close(self) -> None:
        """Close the socket if the connection is still active."""
        if self.status is ConnectionStatus.ACTIVE:
            self.sock.close()
            self.status = ConnectionStatus.CLOSED