from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError, RangeError

OPEN = "open"
CLOSED = "closed"
FILTERED = "filtered"

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class ScanOptions:
    target: str
    start_port: int
    end_port: int
    timeout_ms: int = 2000
    threads: int = 100
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.start_port < MIN_PORT:
            raise RangeError("start port must be ≥ 1")
        if self.end_port <= self.start_port:
            raise RangeError("end port must exceed start port")
        if self.end_port > MAX_PORT:
            raise RangeError("end port must be ≤ 65535")
        if self.timeout_ms < 0:
            raise ConfigError("timeout must be >= 0 ms")
        if self.threads < 1:
            raise ConfigError("threads must be >= 1")

    @property
    def timeout_s(self) -> Optional[float]:
        # 0 ms means no connect deadline
        if self.timeout_ms == 0:
            return None
        return self.timeout_ms / 1000.0

    @property
    def ports(self) -> range:
        return range(self.start_port, self.end_port + 1)


@dataclass(frozen=True)
class PortOutcome:
    port: int
    status: str
    service: Optional[str] = None
    banner: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status == OPEN
