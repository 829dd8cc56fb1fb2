"""A minimal HTTP client that sends one request and prints the response."""

from __future__ import annotations

import re
import socket
import sys
from typing import BinaryIO, TextIO

from tinyhttpd.io_helper import open_client, readline

MAXBUF = 8192
ENCODING = "latin-1"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def send_request(wfile: BinaryIO, filename: str, hostname: str | None = None) -> None:
    """Write a GET request for ``filename``; the host defaults to this machine's name."""
    if hostname is None:
        hostname = socket.gethostname()
    request = f"GET {filename} HTTP/1.1\nhost: {hostname}\n\r\n"
    wfile.write(request.encode(ENCODING, errors="replace"))
    wfile.flush()


def print_response(rfile: BinaryIO, out: TextIO | None = None) -> None:
    """Print each header line prefixed with ``Header: ``, then the body as is."""
    if out is None:
        out = sys.stdout
    line = readline(rfile, MAXBUF)
    while line and line != b"\r\n":
        out.write(f"Header: {line.decode(ENCODING)}")
        line = readline(rfile, MAXBUF)

    for line in iter(lambda: readline(rfile, MAXBUF), b""):
        out.write(line.decode(ENCODING))


def main(argv: list[str] | None = None) -> int:
    """Fetch one file: ``client <host> <port> <filename>``."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 3:
        print("Usage: client <host> <port> <filename>", file=sys.stderr)
        return 1

    host, port_text, filename = argv
    port = _atoi(port_text)

    with open_client(host, port) as conn:
        with conn.makefile("wb") as wfile:
            send_request(wfile, filename)
        with conn.makefile("rb") as rfile:
            print_response(rfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())