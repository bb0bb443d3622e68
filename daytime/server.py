"""A TCP daytime server that answers each connection with the local time."""

from __future__ import annotations

import argparse
import contextlib
import signal
import socket
import sys
import time
from typing import TextIO

from daytime.unp import LISTENQ

DAYTIME_PORT = 13


def _labelled(exc: OSError, label: str) -> OSError:
    """Return an error of the same kind whose message names the failed step."""
    if exc.errno is None:
        return exc
    return OSError(exc.errno, f"{label}: {exc.strerror}")


def format_daytime(when: float | None = None) -> str:
    """Return the daytime reply for *when*: a 24-character ctime line ending in CRLF."""
    if when is None:
        when = time.time()
    return f"{time.ctime(when)[:24]}\r\n"


def create_listener(
    host: str = "", port: int = DAYTIME_PORT, backlog: int = LISTENQ
) -> socket.socket:
    """Create an IPv4 TCP socket bound to *host*:*port* and listening.

    An empty *host* binds to every local address.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise _labelled(exc, "Bind error") from exc
        try:
            sock.listen(backlog)
        except OSError as exc:
            raise _labelled(exc, "Listen error") from exc
    except BaseException:
        sock.close()
        raise
    return sock


def handle_connection(
    conn: socket.socket, when: float | None = None, out: TextIO | None = None
) -> str:
    """Send the time to *conn*, close it, and return what was sent."""
    out = sys.stdout if out is None else out
    stamp = format_daytime(when)
    with conn:
        # A client that hangs up early is not the server's problem.
        with contextlib.suppress(ConnectionError):
            conn.sendall(stamp.encode("ascii"))
    print(f"Sent time: {stamp}", end="", file=out, flush=True)
    print("Connection closed", file=out, flush=True)
    return stamp


def serve(
    listener: socket.socket,
    max_connections: int | None = None,
    out: TextIO | None = None,
) -> int:
    """Accept connections and answer each one; return how many were served.

    With no *max_connections* the loop runs until interrupted.
    """
    out = sys.stdout if out is None else out
    served = 0
    while max_connections is None or served < max_connections:
        conn, _ = listener.accept()
        print("New connection accepted", file=out, flush=True)
        handle_connection(conn, out=out)
        served += 1
    return served


def main(argv: list[str] | None = None) -> int:
    """Run the daytime server until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the time of day over TCP.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument(
        "--port", type=int, default=DAYTIME_PORT, help="port to listen on"
    )
    args = parser.parse_args(argv)

    try:
        listener = create_listener(args.host, args.port)
    except OSError as exc:
        print(exc.strerror or str(exc), file=sys.stderr)
        return 1

    port = listener.getsockname()[1]
    print(f"Daytime server listening on port {port}...", flush=True)
    try:
        serve(listener)
    except KeyboardInterrupt:
        print(
            f"\nReceived signal {int(signal.SIGINT)}, shutting down server...",
            flush=True,
        )
        listener.close()
        print("Closed listening socket.", flush=True)
        return 0
    except OSError as exc:
        print(f"Accept error: {exc}", file=sys.stderr)
        listener.close()
        return 1
    listener.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())