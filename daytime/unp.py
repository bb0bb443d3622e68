"""Shared constants and size helpers for the socket tools."""

from __future__ import annotations

import os
import socket
import stat
import struct

# Second argument to listen(); many kernels support far more than SOMAXCONN.
LISTENQ = 1024

MAXLINE = 4096
MAXSOCKADDR = 128
BUFFSIZE = 8192

SERV_PORT = 9877
SERV_PORT_STR = "9877"

SCTP_PDAPI_INCR_SZ = 65535
SCTP_PDAPI_NEED_MORE_THRESHOLD = 1024
SERV_MAX_SCTP_STRM = 10
SERV_MORE_STRMS_SCTP = 20

SCTP_ON_DEMAND_HB = 1
SCTP_SET_HB_INTERVAL = 2
SCTP_DISABLE_HB = 3

UNIXSTR_PATH = "/tmp/unix.str"
UNIXDG_PATH = "/tmp/unix.dg"

INADDR_NONE = 0xFFFFFFFF

SHUT_RD = getattr(socket, "SHUT_RD", 0)
SHUT_WR = getattr(socket, "SHUT_WR", 1)
SHUT_RDWR = getattr(socket, "SHUT_RDWR", 2)

INET_ADDRSTRLEN = 16
INET6_ADDRSTRLEN = 46

INFTIM = -1

AF_LOCAL = getattr(socket, "AF_UNIX", None)

# sun_path starts after the 16-bit family (or length byte plus family byte).
_SUN_PATH_OFFSET = 2
_SUN_PATH_SIZE = 108

# struct cmsghdr: a size_t length followed by two ints.
_CMSGHDR_SIZE = struct.calcsize("@Nii")


def sun_len(path: str | bytes) -> int:
    """Return the used length of a Unix-domain address holding *path*.

    As with strlen, the path ends at the first NUL byte.
    """
    raw = os.fsencode(path)
    raw = raw.split(b"\0", 1)[0]
    if len(raw) >= _SUN_PATH_SIZE:
        raise ValueError(
            f"path of {len(raw)} bytes does not fit in a Unix-domain address"
        )
    return _SUN_PATH_OFFSET + len(raw)


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"control data size must not be negative: {size}")
    return size


def cmsg_len(size: int) -> int:
    """Return the cmsg_len value for *size* bytes of ancillary data."""
    _check_size(size)
    if hasattr(socket, "CMSG_LEN"):
        return socket.CMSG_LEN(size)
    return _CMSGHDR_SIZE + size


def cmsg_space(size: int) -> int:
    """Return the buffer space one control message with *size* bytes needs."""
    _check_size(size)
    if hasattr(socket, "CMSG_SPACE"):
        return socket.CMSG_SPACE(size)
    return _CMSGHDR_SIZE + size


def file_mode() -> int:
    """Default permissions for newly created files."""
    return stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH


def dir_mode() -> int:
    """Default permissions for newly created directories."""
    return file_mode() | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH