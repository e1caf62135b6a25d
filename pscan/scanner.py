from __future__ import annotations

import errno
import logging
import socket
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional

from .banner import grab_banner
from .errors import ProbeError
from .models import CLOSED, FILTERED, OPEN, PortOutcome, ScanOptions
from .output import ScanReporter
from .services import service_name

log = logging.getLogger(__name__)

Probe = Callable[[ScanOptions, int], PortOutcome]


def connect(target: str, port: int, timeout_s: Optional[float]) -> socket.socket:
    try:
        return socket.create_connection((target, port), timeout=timeout_s)
    except OSError as e:
        raise ProbeError(port, e) from e


def classify_failure(err: ProbeError) -> PortOutcome:
    cause = err.cause
    if isinstance(cause, socket.timeout) or cause.errno == errno.ETIMEDOUT:
        return PortOutcome(port=err.port, status=FILTERED)
    if isinstance(cause, ConnectionRefusedError):
        return PortOutcome(port=err.port, status=CLOSED)

    # Some platforms only tell us through the message
    text = str(cause).lower()
    if "timed out" in text or "timeout" in text:
        return PortOutcome(port=err.port, status=FILTERED)
    if "refused" in text:
        return PortOutcome(port=err.port, status=CLOSED)
    return PortOutcome(port=err.port, status=CLOSED, error=str(cause) or type(cause).__name__)


def probe_port(options: ScanOptions, port: int) -> PortOutcome:
    """One connect attempt against options.target:port, no retries."""
    try:
        sock = connect(options.target, port, options.timeout_s)
    except ProbeError as e:
        log.debug("port %d: %s", port, e)
        return classify_failure(e)

    banner = None
    with sock:
        if options.verbose:
            banner = grab_banner(sock, port) or None

    return PortOutcome(port=port, status=OPEN, service=service_name(port), banner=banner)


def _drain(batch: List[Future]) -> None:
    wait(batch)
    for fut in batch:
        # surfaces bugs in a probe; connect failures never get here
        fut.result()
    batch.clear()


def scan(
    options: ScanOptions,
    sink: Optional[ScanReporter] = None,
    probe: Probe = probe_port,
) -> int:
    """
    Probes every port in [start_port, end_port], streaming each outcome to
    the sink as it completes. Returns the number of ports probed.

    Ports are dispatched in ascending order. After dispatching a port that is
    a multiple of options.threads the engine waits for the whole batch before
    dispatching more, so batches break on port numbers, not dispatch counts.
    """
    if sink is None:
        sink = ScanReporter()

    def run(port: int) -> None:
        sink.emit(probe(options, port), verbose=options.verbose)

    sink.start(options)
    scanned = 0

    with ThreadPoolExecutor(max_workers=options.threads) as pool:
        batch: List[Future] = []
        for port in options.ports:
            batch.append(pool.submit(run, port))
            scanned += 1

            if port % options.threads == 0:
                log.debug("batch boundary at port %d, draining %d probes", port, len(batch))
                _drain(batch)

        _drain(batch)

    sink.complete()
    log.info("scanned %d ports on %s", scanned, options.target)
    return scanned
