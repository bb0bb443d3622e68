"""A TCP daytime client that prints whatever the server sends."""

from __future__ import annotations

import ipaddress
import socket
import sys
from collections.abc import Iterator

from daytime.unp import MAXLINE

DAYTIME_PORT = 13


def _labelled(exc: OSError, label: str) -> OSError:
    """Return an error of the same kind whose message names the failed step."""
    if exc.errno is None:
        return exc
    return OSError(exc.errno, f"{label}: {exc.strerror}")


def parse_address(text: str) -> str:
    """Validate a dotted-quad IPv4 address and return it."""
    try:
        return str(ipaddress.IPv4Address(text))
    except ValueError as exc:
        raise ValueError(f"invalid IPv4 address: {text!r}") from exc


def _receive(
    address: str, port: int = DAYTIME_PORT, timeout: float | None = None
) -> Iterator[str]:
    """Connect to the server and yield the reply as it arrives."""
    host = parse_address(address)
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise _labelled(exc, "socket error") from exc
    with sock:
        sock.settimeout(timeout)
        try:
            sock.connect((host, port))
        except OSError as exc:
            raise _labelled(exc, "connect error") from exc
        while True:
            try:
                data = sock.recv(MAXLINE)
            except OSError as exc:
                raise _labelled(exc, "read error") from exc
            if not data:
                return
            yield data.decode("latin-1")


def fetch_daytime(
    address: str, port: int = DAYTIME_PORT, timeout: float | None = None
) -> str:
    """Return everything the daytime server at *address*:*port* sends."""
    return "".join(_receive(address, port, timeout))


def main(argv: list[str] | None = None) -> int:
    """Print the time reported by a daytime server."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print("Usage: daytime-client <IP address> [port]", file=sys.stderr)
        return 1
    port = DAYTIME_PORT
    if len(args) == 2:
        try:
            port = int(args[1])
        except ValueError:
            print(f"invalid port: {args[1]!r}", file=sys.stderr)
            return 1
    try:
        for chunk in _receive(args[0], port):
            sys.stdout.write(chunk)
            sys.stdout.flush()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc.strerror or str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())