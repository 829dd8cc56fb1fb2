"""A CGI program that waits for a requested number of seconds.

It helps check that a server handles several requests at the same time.
"""

from __future__ import annotations

import os
import re
import sys
import time

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def spin(seconds: float) -> float:
    """Sleep in one-second steps until ``seconds`` have passed; return the time taken."""
    start = time.time()
    while time.time() - start < seconds:
        time.sleep(1)
    return time.time() - start


def render_body(query: str | None, elapsed: float) -> str:
    """Build the HTML body reporting the query and how long the program spun."""
    shown = "" if query is None else query
    return (
        f"<p>Welcome to the CGI program ({shown})</p>\r\n"
        "<p>My only purpose is to waste time on the server!</p>\r\n"
        f"<p>I spun for {elapsed:.2f} seconds</p>\r\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Spin for the number of seconds in ``QUERY_STRING`` and write the response."""
    query = os.environ.get("QUERY_STRING")
    seconds = float(_atoi(query)) if query is not None else 0.0

    elapsed = spin(seconds)
    content = render_body(query, elapsed)

    out = sys.stdout
    out.write(f"Content-Length: {len(content.encode('utf-8'))}\r\n")
    out.write("Content-Type: text/html\r\n\r\n")
    out.write(content)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())