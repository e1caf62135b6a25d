from __future__ import annotations

import logging
import re
import socket

log = logging.getLogger(__name__)

_CONTROL = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

HTTP_PORTS = frozenset({80, 443, 8080})
HTTP_PROBE = b"HEAD / HTTP/1.0\r\n\r\n"

BANNER_TIMEOUT_S = 1.0
BANNER_READ_SIZE = 1024
BANNER_MAX_LEN = 80


def clean_banner(raw: bytes, max_len: int = BANNER_MAX_LEN) -> str:
    """First line of the payload, trimmed and capped at max_len characters."""
    text = raw.decode(errors="ignore").strip()
    text = text.split("\n")[0].strip()
    text = _CONTROL.sub("", text)
    if len(text) > max_len:
        return text[:max_len] + "..."
    return text


def grab_banner(sock: socket.socket, port: int, timeout: float = BANNER_TIMEOUT_S) -> str:
    """
    Called only after connect() succeeds.
    HTTP-ish ports get a HEAD request first since those servers never speak
    first. Returns "" when nothing arrives before the deadline.
    """
    sock.settimeout(timeout)
    try:
        if port in HTTP_PORTS:
            sock.sendall(HTTP_PROBE)
        data = sock.recv(BANNER_READ_SIZE)
    except OSError as e:
        log.debug("no banner on port %d: %s", port, e)
        return ""
    return clean_banner(data)
