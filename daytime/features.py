"""Probe the running platform for the networking facilities the tools rely on."""

from __future__ import annotations

import os
import platform
import select
import socket
from dataclasses import asdict, dataclass

_STREAM_DEVICES = {
    "dev_tcp": "/dev/tcp",
    "dev_xti_tcp": "/dev/xti/tcp",
    "dev_streams_xtiso_tcp": "/dev/streams/xtiso/tcp",
}


@dataclass(frozen=True)
class PlatformFeatures:
    """Networking capabilities found on the current system."""

    cpu_vendor_os: str
    ipv4: bool
    ipv6: bool
    unix_domain: bool
    multicast: bool
    sctp: bool
    getaddrinfo: bool
    getnameinfo: bool
    gethostname: bool
    inet_pton: bool
    inet_aton: bool
    if_nametoindex: bool
    if_nameindex: bool
    msghdr_msg_control: bool
    poll: bool
    kqueue: bool
    dev_tcp: bool
    dev_xti_tcp: bool
    dev_streams_xtiso_tcp: bool

    def as_dict(self) -> dict[str, bool | str]:
        """Return the features as a plain, independent dictionary."""
        return asdict(self)


def _cpu_vendor_os() -> str:
    machine = platform.machine() or "unknown"
    system = platform.system().lower() or "unknown"
    return f"{machine}-{system}"


def detect_features() -> PlatformFeatures:
    """Inspect the interpreter and file system and report what is available."""
    devices = {name: os.path.exists(path) for name, path in _STREAM_DEVICES.items()}
    return PlatformFeatures(
        cpu_vendor_os=_cpu_vendor_os(),
        ipv4=hasattr(socket, "AF_INET"),
        ipv6=bool(getattr(socket, "has_ipv6", False)) and hasattr(socket, "AF_INET6"),
        unix_domain=hasattr(socket, "AF_UNIX"),
        multicast=hasattr(socket, "IP_ADD_MEMBERSHIP"),
        sctp=hasattr(socket, "IPPROTO_SCTP"),
        getaddrinfo=hasattr(socket, "getaddrinfo"),
        getnameinfo=hasattr(socket, "getnameinfo"),
        gethostname=hasattr(socket, "gethostname"),
        inet_pton=hasattr(socket, "inet_pton"),
        inet_aton=hasattr(socket, "inet_aton"),
        if_nametoindex=hasattr(socket, "if_nametoindex"),
        if_nameindex=hasattr(socket, "if_nameindex"),
        msghdr_msg_control=hasattr(socket.socket, "sendmsg")
        and hasattr(socket.socket, "recvmsg"),
        poll=hasattr(select, "poll"),
        kqueue=hasattr(select, "kqueue"),
        **devices,
    )