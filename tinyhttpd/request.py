"""Handling of one HTTP/1.0 request: static files and CGI programs."""

from __future__ import annotations

import os
import socket
import stat
import subprocess
from dataclasses import dataclass
from typing import BinaryIO

from tinyhttpd.io_helper import readline

MAXBUF = 8192
SERVER_NAME = "tinyhttpd"
ENCODING = "latin-1"


@dataclass(frozen=True)
class ParsedUri:
    """Where a request URI points and whether its content is static."""

    is_static: bool
    filename: str
    cgiargs: str = ""


def _write(wfile: BinaryIO, text: str) -> None:
    wfile.write(text.encode(ENCODING, errors="replace"))


def send_error(wfile: BinaryIO, cause: str, errnum: str, shortmsg: str, longmsg: str) -> None:
    """Write a complete HTML error response."""
    body = (
        "<!doctype html>\r\n"
        "<head>\r\n"
        f"  <title>{SERVER_NAME} Error</title>\r\n"
        "</head>\r\n"
        "<body>\r\n"
        f"  <h2>{errnum}: {shortmsg}</h2>\r\n"
        f"  <p>{longmsg}: {cause}</p>\r\n"
        "</body>\r\n"
        "</html>\r\n"
    ).encode(ENCODING, errors="replace")
    _write(wfile, f"HTTP/1.0 {errnum} {shortmsg}\r\n")
    _write(wfile, "Content-Type: text/html\r\n")
    _write(wfile, f"Content-Length: {len(body)}\r\n\r\n")
    wfile.write(body)


def read_headers(rfile: BinaryIO) -> list[bytes]:
    """Consume header lines up to the blank line; return the lines consumed."""
    headers = []
    while True:
        line = readline(rfile, MAXBUF)
        if line in (b"\r\n", b""):
            return headers
        headers.append(line)


def parse_uri(uri: str) -> ParsedUri:
    """Map a URI to a file below the current directory and its CGI arguments."""
    if "cgi" not in uri:
        filename = f".{uri}"
        if uri.endswith("/"):
            filename += "index.html"
        return ParsedUri(is_static=True, filename=filename)
    path, _, cgiargs = uri.partition("?")
    return ParsedUri(is_static=False, filename=f".{path}", cgiargs=cgiargs)


def get_filetype(filename: str) -> str:
    """Guess a content type from the file name."""
    if ".html" in filename:
        return "text/html"
    if ".gif" in filename:
        return "image/gif"
    if ".jpg" in filename:
        return "image/jpeg"
    return "text/plain"


def serve_dynamic(conn: socket.socket, wfile: BinaryIO, filename: str, cgiargs: str) -> int:
    """Start a CGI program with its output going straight to the connection.

    The server writes only the status line and Server header; the program
    finishes the headers. Returns the program's exit status.
    """
    _write(wfile, f"HTTP/1.0 200 OK\r\nServer: {SERVER_NAME}\r\n")
    wfile.flush()
    env = dict(os.environ, QUERY_STRING=cgiargs)
    completed = subprocess.run([filename], stdout=conn.fileno(), env=env, check=False)
    return completed.returncode


def serve_static(wfile: BinaryIO, filename: str, filesize: int) -> None:
    """Write a 200 response holding the first ``filesize`` bytes of a file."""
    filetype = get_filetype(filename)
    with open(filename, "rb") as src:
        data = src.read(filesize)
    _write(
        wfile,
        "HTTP/1.0 200 OK\r\n"
        f"Server: {SERVER_NAME}\r\n"
        f"Content-Length: {filesize}\r\n"
        f"Content-Type: {filetype}\r\n\r\n",
    )
    wfile.write(data)


def handle_request(conn: socket.socket) -> None:
    """Read one request from ``conn`` and write the response to it."""
    with conn.makefile("rb") as rfile, conn.makefile("wb") as wfile:
        line = readline(rfile, MAXBUF).decode(ENCODING)
        method, uri, version = (line.split() + ["", "", ""])[:3]
        print(f"method:{method} uri:{uri} version:{version}")

        if method.upper() != "GET":
            send_error(wfile, method, "501", "Not Implemented",
                       "server does not implement this method")
            return
        read_headers(rfile)

        parsed = parse_uri(uri)
        try:
            info = os.stat(parsed.filename)
        except OSError:
            send_error(wfile, parsed.filename, "404", "Not found",
                       "server could not find this file")
            return

        regular = stat.S_ISREG(info.st_mode)
        if parsed.is_static:
            if not regular or not info.st_mode & stat.S_IRUSR:
                send_error(wfile, parsed.filename, "403", "Forbidden",
                           "server could not read this file")
                return
            serve_static(wfile, parsed.filename, info.st_size)
        else:
            if not regular or not info.st_mode & stat.S_IXUSR:
                send_error(wfile, parsed.filename, "403", "Forbidden",
                           "server could not run this CGI program")
                return
            serve_dynamic(conn, wfile, parsed.filename, parsed.cgiargs)