import socket
import threading

import pytest

from pscan.banner import HTTP_PROBE, clean_banner, grab_banner


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_ssh_banner_first_line(pair):
    client, server = pair
    server.sendall(b"SSH-2.0-OpenSSH_8.9\r\nextra\r\n")
    assert grab_banner(client, 22) == "SSH-2.0-OpenSSH_8.9"


def test_silent_peer_returns_empty(pair):
    client, _server = pair
    assert grab_banner(client, 2222, timeout=0.1) == ""


def test_closed_peer_returns_empty(pair):
    client, server = pair
    server.close()
    assert grab_banner(client, 2222, timeout=0.5) == ""


def test_http_port_sends_head_first(pair):
    client, server = pair
    received = []

    def respond():
        received.append(server.recv(1024))
        server.sendall(b"HTTP/1.0 200 OK\r\nServer: test\r\n\r\n")

    t = threading.Thread(target=respond)
    t.start()
    banner = grab_banner(client, 80)
    t.join()

    assert received == [HTTP_PROBE]
    assert banner == "HTTP/1.0 200 OK"


def test_truncates_long_banner():
    raw = b"A" * 200
    out = clean_banner(raw)
    assert out == "A" * 80 + "..."


def test_exact_max_len_not_truncated():
    assert clean_banner(b"B" * 80) == "B" * 80


def test_strips_whitespace_and_control_bytes():
    assert clean_banner(b"  \r\n 220 ready\x00\x07 \r\nnext") == "220 ready"


def test_keeps_non_ascii_text():
    raw = "220 smtp.bücher.de ESMTP\r\nmore".encode()
    assert clean_banner(raw) == "220 smtp.bücher.de ESMTP"


def test_drops_control_bytes_keeps_tabs():
    assert clean_banner(b"220\tready\x1b[0m\x7f") == "220\tready[0m"
