from .errors import (
    ConfigError,
    FormatError,
    ParseError,
    ProbeError,
    PscanError,
    RangeError,
    ResolutionError,
)
from .models import CLOSED, FILTERED, OPEN, PortOutcome, ScanOptions
from .ports import parse_port_range, resolve_port_range
from .scanner import probe_port, scan

__version__ = "0.1.0"

__all__ = [
    "CLOSED",
    "ConfigError",
    "FILTERED",
    "FormatError",
    "OPEN",
    "ParseError",
    "PortOutcome",
    "ProbeError",
    "PscanError",
    "RangeError",
    "ResolutionError",
    "ScanOptions",
    "parse_port_range",
    "probe_port",
    "resolve_port_range",
    "scan",
]
