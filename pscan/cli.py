from __future__ import annotations

import argparse
import sys

from .errors import ConfigError, ResolutionError
from .logger import create_logger
from .models import ScanOptions
from .ports import resolve_port_range
from .scanner import scan
from .targets import resolve_target

DEFAULT_PORTS = "1-1000"
DEFAULT_TIMEOUT_MS = 2000
DEFAULT_THREADS = 100


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pscan", description="Concurrent TCP connect port scanner")
    p.add_argument("--target", "-t", help="Target host to scan (required)")
    p.add_argument("--ports", "-p", default=DEFAULT_PORTS, help="Port range to scan, start-end (default: 1-1000)")
    p.add_argument("--all", "-a", dest="all_ports", action="store_true", help="Scan all ports (1-65535)")
    p.add_argument("--common", action="store_true", help="Scan only common ports (1-1024)")
    p.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT_MS, help="Connection timeout in milliseconds (default: 2000)")
    p.add_argument("--threads", type=int, default=DEFAULT_THREADS, help="Number of concurrent probes (default: 100)")
    p.add_argument("--verbose", "-v", action="store_true", help="Report closed/filtered ports and grab banners")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    return p


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    if not argv:
        print("Port Scanner - A simple tool for scanning open ports")
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    create_logger(args.log_level)

    target = (args.target or "").strip()
    if not target:
        print("Error: Target host is required")
        print("Use --target or -t to specify a target host")
        return 1

    try:
        resolve_target(target)
    except ResolutionError as e:
        print(f"Error resolving host {target}: {e}")
        return 1

    try:
        start, end = resolve_port_range(args.ports, all_ports=args.all_ports, common=args.common)
    except ConfigError as e:
        print(f"Error with port range: {e}")
        return 1

    try:
        options = ScanOptions(
            target=target,
            start_port=start,
            end_port=end,
            timeout_ms=args.timeout,
            threads=args.threads,
            verbose=args.verbose,
        )
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    scan(options)
    return 0


def run() -> None:
    raise SystemExit(main())
