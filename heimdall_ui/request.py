"""Fetching documents over HTTP and HTTPS."""

from __future__ import annotations

import http.client
import logging
from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit

__all__ = ["Response", "RequestError", "request_host", "USER_AGENT", "MAX_REDIRECTS"]

log = logging.getLogger(__name__)

USER_AGENT = "heimdall-ui/1.0"
MAX_REDIRECTS = 50
_REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})


class RequestError(Exception):
    """Raised when a host could not be requested."""


@dataclass(frozen=True)
class Response:
    """The result of a completed request."""

    body: bytes
    header: bytes
    response_code: int
    http_version: str
    site_ip: str
    url: str

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


def _connection(url: str) -> tuple[http.client.HTTPConnection, str]:
    parts = urlsplit(url)
    if parts.scheme == "http":
        conn_cls = http.client.HTTPConnection
    elif parts.scheme == "https":
        conn_cls = http.client.HTTPSConnection
    else:
        raise RequestError(f"unsupported scheme in {url!r}")
    try:
        port = parts.port
    except ValueError as exc:
        raise RequestError(f"invalid port in {url!r}") from exc
    if not parts.hostname:
        raise RequestError(f"no host in {url!r}")
    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"
    return conn_cls(parts.hostname, port), path


def _fetch(url: str) -> tuple[http.client.HTTPResponse, bytes, str]:
    conn, path = _connection(url)
    try:
        conn.request("GET", path, headers={"User-Agent": USER_AGENT, "Accept": "*/*"})
        ip = conn.sock.getpeername()[0] if conn.sock is not None else ""
        response = conn.getresponse()
        body = response.read()
    finally:
        conn.close()
    return response, body, ip


def _header_block(response: http.client.HTTPResponse) -> bytes:
    version = "1.0" if response.version == 10 else "1.1"
    lines = [f"HTTP/{version} {response.status} {response.reason}"]
    lines.extend(f"{name}: {value}" for name, value in response.getheaders())
    return ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1", errors="replace")


def request_host(url: str) -> Response:
    """GET *url*, following redirects, and return the final response.

    Headers of every response on the way, redirects included, are
    collected in ``header``. Network failures raise :class:`RequestError`;
    HTTP error statuses are returned like any other response.
    """
    log.debug('requesting host at "%s"', url)
    current = url if "://" in url else f"http://{url}"
    headers = bytearray()

    for _ in range(MAX_REDIRECTS + 1):
        try:
            response, body, ip = _fetch(current)
        except RequestError:
            raise
        except (OSError, http.client.HTTPException, ValueError) as exc:
            log.error('something went wrong while requesting "%s"', url)
            raise RequestError(f"request to {url!r} failed: {exc}") from exc

        headers += _header_block(response)
        location = response.getheader("Location")
        if response.status in _REDIRECT_CODES and location:
            current = urljoin(current, location)
            continue

        return Response(
            body=body,
            header=bytes(headers),
            response_code=response.status,
            http_version="1.0" if response.version == 10 else "1.1",
            site_ip=ip,
            url=current,
        )

    raise RequestError(f"too many redirects while requesting {url!r}")