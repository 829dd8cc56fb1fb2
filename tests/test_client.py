import io
import socket
import threading

from tinyhttpd.client import main, print_response, send_request
from tinyhttpd.io_helper import open_listen


def test_send_request_wire_format():
    buf = io.BytesIO()
    send_request(buf, "/index.html", "example.com")
    assert buf.getvalue() == b"GET /index.html HTTP/1.1\nhost: example.com\n\r\n"


def test_send_request_defaults_to_local_hostname():
    buf = io.BytesIO()
    send_request(buf, "/a.txt")
    expected_host = socket.gethostname().encode("latin-1", errors="replace")
    assert buf.getvalue().split(b"\n")[1] == b"host: " + expected_host


def test_print_response_prefixes_headers_and_copies_body():
    raw = b"HTTP/1.0 200 OK\r\nContent-Type: text/plain\r\n\r\nhello\nworld\n"
    out = io.StringIO()
    print_response(io.BytesIO(raw), out)
    assert out.getvalue() == (
        "Header: HTTP/1.0 200 OK\r\n"
        "Header: Content-Type: text/plain\r\n"
        "hello\nworld\n"
    )


def test_print_response_stops_at_end_of_stream_without_blank_line():
    raw = b"HTTP/1.0 404 Not found\r\n"
    out = io.StringIO()
    print_response(io.BytesIO(raw), out)
    assert out.getvalue() == "Header: HTTP/1.0 404 Not found\r\n"


def test_main_rejects_wrong_argument_count(capsys):
    assert main(["localhost", "80"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_fetches_from_local_server(capsys):
    listener = open_listen(0)
    port = listener.getsockname()[1]
    received = []

    def serve_once():
        conn, _ = listener.accept()
        with conn:
            data = b""
            while not data.endswith(b"\n\r\n"):
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            received.append(data)
            conn.sendall(b"HTTP/1.0 200 OK\r\nContent-Length: 3\r\n\r\nhi\n")

    thread = threading.Thread(target=serve_once)
    thread.start()
    try:
        assert main(["localhost", str(port), "/file.txt"]) == 0
    finally:
        thread.join(timeout=5)
        listener.close()

    out = capsys.readouterr().out
    assert received[0].startswith(b"GET /file.txt HTTP/1.1\n")
    assert "Header: HTTP/1.0 200 OK\r\n" in out
    assert out.endswith("hi\n")