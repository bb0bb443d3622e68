# daytime

This package implements the TCP daytime service. The server answers every
connection with the current local time and then closes the connection. The
client connects to a server, copies what it receives to standard output, and
exits. The package also holds a few socket helper utilities.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Running the server

```
daytime-server [--host HOST] [--port PORT]
```

By default the server listens on TCP port 13 on all IPv4 interfaces. Most
systems need elevated privileges to bind a port below 1024. Use `--port` to pick
another port. Port `0` lets the system choose one, and the startup line reports
the port chosen:

```
Daytime server listening on port 13...
```

For each connection the server does the following:

1. It prints `New connection accepted`.
2. It sends one line in `ctime` form, such as `Mon Jan  1 12:00:00 2024\r\n`.
3. It closes the connection.
4. It prints the time it sent, then `Connection closed`.

Press Ctrl-C to stop the server. It closes its listening socket before it
exits, with status 0. If the socket cannot be bound or cannot listen, the
server prints the reason on standard error and exits with status 1. It does the
same if accepting a connection fails.

## Running the client

```
daytime-client <IP address> [port]
```

The client takes a dotted-quad IPv4 address and, optionally, a port. The port
defaults to 13. The client copies everything the server sends to standard
output.

It exits with status 1 in these cases, printing a message on standard error
each time:

- there are no arguments, or too many
- the address is not a valid IPv4 address
- the port is not a number
- the connection fails or a read fails

## Using it as a library

```python
import sys

from daytime.client import fetch_daytime, parse_address
from daytime.server import create_listener, format_daytime, serve

print(format_daytime(0.0), end="")      # ctime of the given POSIX timestamp, plus CRLF
print(format_daytime(), end="")         # the current time

listener = create_listener("127.0.0.1", 0, 16)
port = listener.getsockname()[1]
# serve(listener, max_connections=1, out=sys.stdout) answers one connection
# and returns the number served; without max_connections it runs forever.

text = fetch_daytime(parse_address("127.0.0.1"), port=port, timeout=5.0)
```

### `daytime.server`

- `format_daytime(when=None)` formats a POSIX timestamp. It returns the first
  24 characters of its `ctime` form followed by `\r\n`.
- `create_listener(host="", port=13, backlog=LISTENQ)` creates a bound,
  listening IPv4 TCP socket.
- `handle_connection(conn, when=None, out=None)` sends the time on one
  connection, closes it, and returns the text sent. The log goes to `out`, or
  to standard output.
- `serve(listener, max_connections=None, out=None)` accepts and answers
  connections.
- `main(argv=None)` is the entry point of the `daytime-server` command.

### `daytime.client`

- `parse_address(text)` returns a validated IPv4 address. It raises
  `ValueError` otherwise.
- `fetch_daytime(address, port=13, timeout=None)` returns the whole reply as a
  string. It raises `OSError` on socket, connect or read failure.
- `main(argv=None)` is the entry point of the `daytime-client` command.

### Other modules

- `daytime.unp` holds the shared constants. These include `LISTENQ`, `MAXLINE`,
  `BUFFSIZE`, `SERV_PORT`, `UNIXSTR_PATH` and `INET_ADDRSTRLEN`. It also has
  these helpers:
  - `sun_len(path)` gives the used length of a Unix-domain address.
  - `cmsg_len(size)` and `cmsg_space(size)` give control-message sizes.
  - `file_mode()` and `dir_mode()` give the default permission bits.
- `daytime.storage` provides `SockaddrStorage`, a generic socket address buffer
  of `STORAGE_SIZE` bytes tagged with an address family:
  - `to_bytes()` and `SockaddrStorage.from_bytes()` convert it to and from raw
    bytes.
  - `zeroed_storage(family)` builds an all-zero buffer for a family.
- `daytime.features` provides `detect_features()`. It returns a
  `PlatformFeatures` record of the networking facilities that this interpreter
  and system provide. Examples are IPv6, Unix-domain sockets, multicast, SCTP,
  `poll` and `kqueue`. The record's `as_dict()` method gives the same facts as
  a plain dictionary.

## What it does not do

- It speaks only the TCP form of the daytime service over IPv4. There is no
  UDP daytime service and no IPv6 support in the client or the server.
- The client accepts numeric addresses only. It does not look up host names.
- `daytime.unp` provides constants and size helpers only. It is not a general
  library of socket wrappers. There are no TCP or UDP connect or listen
  helpers, no multicast or SCTP routines, and no line-reading functions beyond
  what the client and server use.

## Running the tests

```
pytest
```