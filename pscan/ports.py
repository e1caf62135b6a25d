from __future__ import annotations

import re
from typing import Optional, Tuple

from .errors import FormatError, ParseError, RangeError
from .models import MAX_PORT, MIN_PORT

ALL_PORTS: Tuple[int, int] = (MIN_PORT, MAX_PORT)
COMMON_PORTS: Tuple[int, int] = (1, 1024)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _to_int(token: str) -> int:
    # plain ASCII digits only: no whitespace, underscores or other scripts
    if not _INT_TOKEN.fullmatch(token):
        raise ParseError(token)
    return int(token)


def parse_port_range(spec: str) -> Tuple[int, int]:
    """
    Parses a "start-end" string into a validated (start, end) pair.
    Checks run in order: shape, integer tokens, start >= 1, end > start,
    end <= 65535.
    """
    parts = spec.split("-")
    if len(parts) != 2:
        raise FormatError(f"invalid port range format {spec!r}, use: start-end")

    start = _to_int(parts[0])
    end = _to_int(parts[1])

    if start < MIN_PORT:
        raise RangeError("start port must be ≥ 1")
    if end <= start:
        raise RangeError("end port must exceed start port")
    if end > MAX_PORT:
        raise RangeError("end port must be ≤ 65535")
    return start, end


def resolve_port_range(
    ports: Optional[str],
    all_ports: bool = False,
    common: bool = False,
) -> Tuple[int, int]:
    # --all beats --common beats an explicit range
    if all_ports:
        return ALL_PORTS
    if common:
        return COMMON_PORTS
    if ports is None:
        raise FormatError("no port range given")
    return parse_port_range(ports)
