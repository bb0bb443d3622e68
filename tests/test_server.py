import io
import socket
import threading
import time

import pytest

from daytime.server import (
    create_listener,
    format_daytime,
    handle_connection,
    main,
    serve,
)


def _read_all(sock):
    chunks = []
    while True:
        data = sock.recv(4096)
        if not data:
            return b"".join(chunks)
        chunks.append(data)


def test_format_daytime_matches_local_time_fields():
    when = 1_000_000_000
    reply = format_daytime(when)
    assert reply.endswith("\r\n")
    assert len(reply) == 26
    parsed = time.strptime(reply[:24], "%a %b %d %H:%M:%S %Y")
    assert parsed[:6] == time.localtime(when)[:6]


def test_format_daytime_defaults_to_now():
    before = time.time()
    reply = format_daytime()
    after = time.time()
    parsed = time.mktime(time.strptime(reply[:24], "%a %b %d %H:%M:%S %Y"))
    assert int(before) - 1 <= parsed <= after + 1


def test_create_listener_accepts_connections():
    with create_listener("127.0.0.1", 0) as listener:
        host, port = listener.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
        with socket.create_connection((host, port), timeout=5):
            conn, _ = listener.accept()
            conn.close()
        assert listener.type == socket.SOCK_STREAM


def test_create_listener_reports_bind_error():
    with create_listener("127.0.0.1", 0) as busy:
        port = busy.getsockname()[1]
        with pytest.raises(OSError) as info:
            create_listener("127.0.0.1", port)
    assert info.value.strerror.startswith("Bind error")


def test_handle_connection_sends_time_and_closes():
    server_side, client_side = socket.socketpair()
    out = io.StringIO()
    when = 1_234_567_890
    with client_side:
        sent = handle_connection(server_side, when, out)
        received = _read_all(client_side)
    assert sent == format_daytime(when)
    assert received == sent.encode("ascii")
    assert server_side.fileno() == -1
    lines = out.getvalue().splitlines()
    assert lines == [f"Sent time: {sent[:24]}", "Connection closed"]


def test_serve_answers_the_requested_number_of_connections():
    out = io.StringIO()
    result = []
    with create_listener("127.0.0.1", 0) as listener:
        port = listener.getsockname()[1]
        worker = threading.Thread(
            target=lambda: result.append(serve(listener, 2, out))
        )
        worker.start()
        replies = []
        for _ in range(2):
            with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
                replies.append(_read_all(client))
        worker.join(timeout=5)
    assert result == [2]
    assert [len(reply) for reply in replies] == [26, 26]
    assert [reply[-2:] for reply in replies] == [b"\r\n", b"\r\n"]
    assert out.getvalue().count("New connection accepted") == 2
    assert out.getvalue().count("Connection closed") == 2


def test_main_fails_when_port_is_taken(capsys):
    with create_listener("127.0.0.1", 0) as busy:
        port = busy.getsockname()[1]
        status = main(["--host", "127.0.0.1", "--port", str(port)])
    assert status == 1
    assert "Bind error" in capsys.readouterr().err