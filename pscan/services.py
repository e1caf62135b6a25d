from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

SERVICE_TABLE: Mapping[int, str] = MappingProxyType({
    20: "FTP-data",
    21: "FTP",
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    111: "RPC",
    135: "RPC",
    139: "NetBIOS",
    143: "IMAP",
    443: "HTTPS",
    445: "SMB",
    993: "IMAPS",
    995: "POP3S",
    1723: "PPTP",
    3306: "MySQL",
    3389: "RDP",
    5900: "VNC",
    8080: "HTTP-Proxy",
})


def service_name(port: int) -> Optional[str]:
    return SERVICE_TABLE.get(port)
