"""Line reading and socket setup shared by the server and the client."""

from __future__ import annotations

import socket
from typing import BinaryIO

LISTEN_BACKLOG = 1024


def readline(stream: BinaryIO, maxlen: int) -> bytes:
    """Read one line of at most ``maxlen - 1`` bytes, newline included.

    Returns ``b""`` once the stream is exhausted.
    """
    if maxlen < 1:
        raise ValueError("maxlen must be at least 1")
    return stream.readline(maxlen - 1)


def open_client(hostname: str, port: int) -> socket.socket:
    """Open a TCP connection to ``hostname:port`` over IPv4."""
    address = socket.gethostbyname(hostname)
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((address, port))
    except OSError:
        sock.close()
        raise
    return sock


def open_listen(port: int) -> socket.socket:
    """Create a socket listening on ``port`` on every IPv4 address of this host."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        # Avoids "Address already in use" when restarting on the same port.
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
        sock.listen(LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock