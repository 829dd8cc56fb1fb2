# tinyhttpd

tinyhttpd is a small HTTP/1.0 web server. It has a fixed pool of worker
threads and a bounded queue of accepted connections. It serves regular
files from a root directory and runs CGI programs. The package also has a
minimal client and a CGI program that only uses up time. You can use that
program to check that the server handles requests at the same time.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Running the server

```
tinyhttpd-server [-d basedir] [-p port] [-t threads] [-b buffers] [-s schedalg]
```

- `-d` is the directory to serve from. The default is the current directory.
  The server changes into this directory before it starts.
- `-p` is the port to listen on. The server listens on every IPv4 address.
  The default is 10000.
- `-t` is the number of worker threads. The default is 1, and the value must be greater than 0.
- `-b` is the number of accepted connections that may wait for a worker. The default is 1,
  and the value must be greater than 0. Once the queue is full, the server stops accepting
  connections until a worker takes one.
- `-s` is a scheduling policy name. The default is `FIFO`. The option is accepted and stored,
  but it has no effect. Connections are always handled in the order they arrive.

An unknown option, a thread count that is not positive or a buffer count
that is not positive prints a message to standard error. The command then
exits with status 1. Number arguments are read as a leading integer, so
text that does not start with a number counts as 0. Press Ctrl-C to stop
the server.

For each request the server prints `method:... uri:... version:...` to
standard output.

Only `GET` is supported, in any letter case. Any other method gets
`501 Not Implemented`.

A URI that does not contain `cgi` is a static file, and its path is taken
relative to the root directory. A URI that ends in `/` is served as
`index.html` in that directory. The content type comes from the file name:

| File name contains | Content type |
|--------------------|--------------|
| `.html`            | text/html    |
| `.gif`             | image/gif    |
| `.jpg`             | image/jpeg   |
| anything else      | text/plain   |

A URI that contains `cgi` is a CGI program, and the server runs that file.
The part of the URI after the first `?` is passed to the program in the
`QUERY_STRING` environment variable. The server writes only the status
line and a `Server: tinyhttpd` header. The program's standard output goes
straight to the client, so the program has to write the rest of the
headers, the blank line and the body itself.

A file that does not exist gets `404 Not found`. A file gets
`403 Forbidden` in either of these cases:

- It is not a regular file.
- Its owner may not read it (static files) or may not execute it (CGI programs).

Error responses are short HTML pages.

## Fetching a page

```
tinyhttpd-client localhost 10000 /index.html
```

The client sends one `GET` request and gives this machine's host name as
the host. It prints each response header line prefixed with `Header: `,
then prints the body unchanged. With the wrong number of arguments it
prints a usage line and exits with status 1.

## The spin CGI program

`tinyhttpd-spin` reads a whole number of seconds from the start of
`QUERY_STRING`. If that text does not start with a number, it uses 0. The
program sleeps in one-second steps until at least that many seconds have
passed. It then writes the `Content-Length` and `Content-Type` headers and
a short HTML body that shows the query and how long the program waited.

To use it through the server:

1. Put an executable file in the served directory whose name contains `cgi`
   and which runs `tinyhttpd-spin`.
2. Request that file with the number of seconds after `?`:

```
tinyhttpd-client localhost 10000 "/spin.cgi?5"
```

If you send several such requests at once and they all finish at about
the same time, the worker threads are handling them in parallel.

## Library use

The building blocks can also be imported:

- `tinyhttpd.request`:
  - `parse_uri`, which returns a `ParsedUri` with `is_static`, `filename` and `cgiargs`
  - `get_filetype`, `read_headers`, `send_error`, `serve_static`, `serve_dynamic` and `handle_request`
- `tinyhttpd.server`:
  - `RequestQueue`, a bounded blocking FIFO with `put` and `get`
  - `ServerOptions`, `parse_args`, `worker` and `serve`

  `worker` stops when it takes `None` from the queue.
- `tinyhttpd.client`: `send_request` and `print_response`.
- `tinyhttpd.spin`: `spin` and `render_body`.
- `tinyhttpd.io_helper`: `readline`, `open_client` and `open_listen`.

## What it does not do

- Each connection carries one request. Keep-alive is not supported.
- Request headers are read and discarded.
- There is no method other than `GET`.
- URIs are not percent-decoded.
- Paths are not checked for `..`, so a URI can reach files outside the root directory.
- There is only one scheduling policy, first in, first out.