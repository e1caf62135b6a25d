from __future__ import annotations

from typing import Optional


class PscanError(Exception):
    """Base class for every error raised by pscan."""


class ConfigError(PscanError):
    """Bad flags or port range. Fatal, reported before scanning starts."""


class FormatError(ConfigError):
    pass


class ParseError(ConfigError):
    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message or f"invalid port: {token!r}")


class RangeError(ConfigError):
    pass


class ResolutionError(PscanError):
    """Target host could not be resolved."""


class ProbeError(PscanError):
    """
    A single connect attempt failed.
    Never fatal: the engine turns it into a closed/filtered outcome.
    """

    def __init__(self, port: int, cause: OSError):
        self.port = port
        self.cause = cause
        super().__init__(str(cause))
