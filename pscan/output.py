from __future__ import annotations

import sys
import threading
from typing import List, Optional, TextIO

from .models import CLOSED, FILTERED, OPEN, PortOutcome, ScanOptions


def format_outcome(r: PortOutcome) -> List[str]:
    if r.status == OPEN:
        line = f"Port {r.port}/tcp open"
        if r.service:
            line += f" - {r.service}"
        lines = [line]
        if r.banner:
            lines.append(f"  └─ Banner: {r.banner}")
        return lines
    if r.status == FILTERED:
        return [f"Port {r.port}/tcp filtered (timeout)"]
    if r.status == CLOSED:
        return [f"Port {r.port}/tcp closed ({r.error or 'connection refused'})"]
    raise ValueError(f"Unknown port status: {r.status}")


class ScanReporter:
    """
    The one output stream every probe writes to.
    Each outcome goes out as a single write under a lock, so lines from
    concurrent probes never interleave.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._lock = threading.Lock()

    def write_lines(self, lines: List[str]) -> None:
        if not lines:
            return
        with self._lock:
            self.stream.write("\n".join(lines) + "\n")
            self.stream.flush()

    def start(self, options: ScanOptions) -> None:
        lines = [f"Starting port scan on {options.target} (ports {options.start_port}-{options.end_port})"]
        if options.verbose:
            lines.append(f"Using {options.threads} threads with {options.timeout_ms}ms timeout")
        self.write_lines(lines)

    def emit(self, outcome: PortOutcome, verbose: bool) -> None:
        # closed/filtered stay quiet unless verbose
        if not outcome.is_open and not verbose:
            return
        self.write_lines(format_outcome(outcome))

    def complete(self) -> None:
        self.write_lines(["Scan complete!"])
