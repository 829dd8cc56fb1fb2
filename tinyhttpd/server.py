"""A multi-threaded web server feeding connections to a pool of workers."""

from __future__ import annotations

import getopt
import os
import re
import socket
import sys
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from tinyhttpd.io_helper import open_listen
from tinyhttpd.request import handle_request

USAGE = "usage: wserver [-d basedir] [-p port] [-t threads] [-b buffers] [-s schedalg]"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


class RequestQueue:
    """A bounded first-in first-out buffer shared by the acceptor and the workers."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Invalid buffer size: must be greater than 0")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._nonempty = threading.Condition(self._lock)
        self._nonfull = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, item: Any) -> None:
        """Add ``item``, waiting while the buffer is full."""
        with self._lock:
            while len(self._items) >= self.capacity:
                self._nonfull.wait()
            self._items.append(item)
            self._nonempty.notify()

    def get(self) -> Any:
        """Remove and return the oldest item, waiting while the buffer is empty."""
        with self._lock:
            while not self._items:
                self._nonempty.wait()
            item = self._items.popleft()
            self._nonfull.notify()
            return item


@dataclass(frozen=True)
class ServerOptions:
    """Command-line settings of the server."""

    root_dir: str = "."
    port: int = 10000
    threads: int = 1
    buffers: int = 1
    schedalg: str = "FIFO"


def parse_args(argv: list[str]) -> ServerOptions:
    """Parse ``-d -p -t -b -s`` options; raise ValueError on bad input."""
    try:
        opts, _ = getopt.getopt(argv, "d:p:t:b:s:")
    except getopt.GetoptError as exc:
        raise ValueError(USAGE) from exc

    values: dict[str, Any] = {}
    for flag, arg in opts:
        if flag == "-d":
            values["root_dir"] = arg
        elif flag == "-p":
            values["port"] = _atoi(arg)
        elif flag == "-t":
            values["threads"] = _atoi(arg)
        elif flag == "-b":
            values["buffers"] = _atoi(arg)
        elif flag == "-s":
            values["schedalg"] = arg

    options = ServerOptions(**values)
    if options.threads <= 0:
        raise ValueError("Invalid thread count: must be greater than 0")
    if options.buffers <= 0:
        raise ValueError("Invalid buffer size: must be greater than 0")
    return options


def worker(queue: RequestQueue, handler: Callable[[Any], None] = handle_request) -> None:
    """Take connections from ``queue``, handle and close each; stop on ``None``."""
    while True:
        conn = queue.get()
        if conn is None:
            return
        try:
            handler(conn)
        finally:
            conn.close()


def serve(options: ServerOptions) -> None:
    """Serve from ``options.root_dir`` forever."""
    queue = RequestQueue(options.buffers)
    os.chdir(options.root_dir)

    for _ in range(options.threads):
        threading.Thread(target=worker, args=(queue,), daemon=True).start()

    with open_listen(options.port) as listener:
        while True:
            conn: socket.socket
            conn, _ = listener.accept()
            queue.put(conn)


def main(argv: list[str] | None = None) -> int:
    """Run the server from command-line arguments."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        serve(options)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())