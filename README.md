# zerod

`zerod` is a small TCP listening server. It resolves a passive address for a
port, opens a non-blocking stream socket with address reuse enabled, binds and
listens on it, and runs an event loop built on the standard `selectors`
module. Each incoming connection is accepted and kept in the server's list of
connections until the server is cleaned up.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Running the server

```
zerod
zerod --port 9000
```

The command logs its process id and listens over IPv4 on the given port
(8080 by default). It runs until polling fails or it is interrupted. Log lines
go to standard error, prefixed with a UTC time and the level:

```
12:34:56 [ INFO] Starting zerod (pid: 4242)
```

Debug, warning and error labels are coloured with ANSI escape codes.

## Using it as a library

```python
import socket

from zerod.server import Server

with Server("8080", socket.AF_INET) as server:
    server.poll_once(1.0)   # wait up to one second and handle what arrived
    print(len(server.connections), "connection(s) accepted")
```

Entering the `with` block calls `Server.setup()`, which resolves the address,
creates, binds and listens on the socket and registers it for polling. If any
step fails it logs the error, cleans up and raises `ServerError`, whose
`status` (like the server's own `status`) is a `ServerStatus` other than `OK`.
`Server.port` gives the port actually bound, so `Server("0")` can be used to
listen on a free port.

- `Server.poll_once(timeout)` waits for readiness events (at most ten are
  handled per call), accepts pending clients on the listening socket and
  returns the number of events. A polling failure sets the status to
  `ERROR_EVENTLOOP` and raises `ServerError`.
- `Server.accept_new_connection()` accepts one waiting client and returns its
  `Connection`, or `None` if no client is waiting.
- `Server.event_loop()` calls `poll_once` with no timeout for as long as the
  status is `OK`.
- `Server.cleanup()` (called on leaving the `with` block) closes every active
  connection, the poller and the listening socket.
- `zerod.server.serve(port, address_family)` sets up a server, runs its loop,
  cleans up and returns the final `ServerStatus`; this is what the command
  runs.

Other modules:

- `zerod.buffer.Buffer` – a growable sequence of fixed-size byte records
  (`push`, `push_zeros`, `at`, `clear`, `free`) whose `capacity` doubles as it
  fills.
- `zerod.log` – `log_debug`, `log_info`, `log_warn` and `log_error` taking
  printf-style format strings, plus `log(stream, level, color, fmt, *args)`,
  `format_prefix` and the `LogLevel` enum.
- `zerod.sockutil` – `set_socket_option` and `set_nonblocking`, which log and
  re-raise `OSError` on failure.
- `zerod.connection` – the `Connection` record (socket, peer address, status)
  and its `ConnectionStatus`.

## What it does not do

The server only accepts connections. It never reads from or writes to a
client, so it does not parse HTTP requests or send responses, and accepted
connections stay open until `cleanup()`. There is no configuration beyond the
port, and no graceful shutdown other than interrupting the process.