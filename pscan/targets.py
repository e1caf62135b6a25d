from __future__ import annotations

import ipaddress
import logging
import socket
from typing import List

from .errors import ResolutionError

log = logging.getLogger(__name__)


def resolve_target(target: str) -> List[str]:
    """
    Supports:
      - IP literal: "172.20.0.10", "::1"
      - Hostname: "webapp" (every address it resolves to)
    Raises ResolutionError when the name does not resolve.
    """
    target = target.strip()
    if not target:
        raise ResolutionError("Empty target")

    try:
        return [str(ipaddress.ip_address(target))]
    except ValueError:
        pass

    try:
        infos = socket.getaddrinfo(target, None, proto=socket.IPPROTO_TCP)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(f"Could not resolve target '{target}': {e}") from e

    addrs: List[str] = []
    for info in infos:
        addr = info[4][0]
        if addr not in addrs:
            addrs.append(addr)
    log.info("resolved %s to %s", target, ", ".join(addrs))
    return addrs
