"""
HTTP transport for the Docker daemon
Pure Python implementation using http.client and socket
"""

import socket
import http.client
import json
import logging
import platform
import os
from typing import Optional, Dict, Any
from urllib.parse import quote, urlparse

logger = logging.getLogger(__name__)

DEFAULT_UNIX_SOCKET = '/var/run/docker.sock'


class UnixHTTPConnection(http.client.HTTPConnection):
    """HTTP connection over Unix socket"""

    def __init__(self, socket_path: str, timeout: int = 60):
        super().__init__('localhost', timeout=timeout)
        self.socket_path = socket_path

    def connect(self):
        """Connect to Unix socket"""
        self.sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.sock.settimeout(self.timeout)
        self.sock.connect(self.socket_path)


def encode_params(params: Optional[Dict[str, Any]]) -> str:
    """Encode query parameters the way the Docker API expects them"""
    if not params:
        return ''

    query_parts = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        elif isinstance(value, (list, dict)):
            value = json.dumps(value)
        query_parts.append(f"{key}={quote(str(value))}")
    return '&'.join(query_parts)


class Request:
    """A fully built HTTP request, not yet sent"""

    def __init__(self, method: str, url: str, body: Optional[bytes] = None,
                 headers: Optional[Dict[str, str]] = None,
                 params: Optional[Dict[str, Any]] = None):
        self.method = method.upper()
        self.url = url
        self.body = body
        self.headers = dict(headers or {})
        self.params = dict(params or {})

    @property
    def full_url(self) -> str:
        """URL including the encoded query string"""
        query = encode_params(self.params)
        if query:
            return f"{self.url}?{query}"
        return self.url

    def __repr__(self):
        return f"<Request: {self.method} {self.full_url}>"

    def __str__(self):
        lines = [f"{self.method} {self.full_url} HTTP/1.1"]
        for name, value in self.headers.items():
            lines.append(f"{name}: {value}")
        lines.append('')
        if self.body:
            lines.append(self.body.decode('utf-8', errors='replace'))
        else:
            lines.append('')
        return '\r\n'.join(lines)


class Response:
    """HTTP response returned by the Docker daemon"""

    def __init__(self, status_code: int, body: bytes = b'',
                 headers: Optional[Dict[str, str]] = None, reason: str = ''):
        self.status_code = status_code
        self.body = body or b''
        self.headers = dict(headers or {})
        self.reason = reason

    def __repr__(self):
        return f"<Response: {self.status_code}>"

    @property
    def text(self) -> str:
        """Body decoded as UTF-8"""
        return self.body.decode('utf-8', errors='replace')

    def json(self) -> Any:
        """
        Parse the body as JSON

        Raises:
            ValueError: If the body is not valid JSON
        """
        try:
            return json.loads(self.text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Response body is not valid JSON: {e}") from e


class DockerHTTPClient:
    """HTTP client for Docker daemon"""

    def __init__(self, base_url: Optional[str] = None, timeout: int = 60):
        """
        Initialize Docker HTTP client

        Args:
            base_url: Docker socket path, unix:// URL or tcp:// / http:// address
                      (default: auto-detect local socket)
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self.socket_path = None
        self.host = None
        self.port = None

        if base_url is None:
            self.socket_path = self._detect_socket()
        elif base_url.startswith(('tcp://', 'http://')):
            parsed = urlparse(base_url.replace('tcp://', 'http://', 1))
            self.host = parsed.hostname or 'localhost'
            self.port = parsed.port or 2375
        else:
            # Remove unix:// prefix if present
            self.socket_path = base_url.replace('unix://', '', 1)

    @staticmethod
    def _detect_socket() -> str:
        """Find the local Docker socket"""
        if platform.system() == "Darwin":  # macOS
            socket_path = os.path.expanduser('~/.docker/run/docker.sock')
            if os.path.exists(socket_path):
                return socket_path
        return DEFAULT_UNIX_SOCKET

    @property
    def base_url(self) -> str:
        if self.socket_path:
            return f"unix://{self.socket_path}"
        return f"tcp://{self.host}:{self.port}"

    def _connection(self) -> http.client.HTTPConnection:
        if self.socket_path:
            if not os.path.exists(self.socket_path):
                raise FileNotFoundError(f"Docker socket not found: {self.socket_path}")
            return UnixHTTPConnection(self.socket_path, timeout=self.timeout)
        return http.client.HTTPConnection(self.host, self.port, timeout=self.timeout)

    def create_request(self, method: str, url: str,
                       options: Optional[Dict[str, Any]] = None) -> Request:
        """
        Build a request without sending it

        Args:
            method: HTTP method (GET, POST, DELETE, etc.)
            url: API path, already versioned
            options: Optional 'body', 'headers' and 'params' entries.
                     A dict or list body is encoded as JSON.

        Returns:
            Request object
        """
        options = options or {}

        # Prepare headers
        headers = {'Host': self.host or 'localhost'}
        headers.update(options.get('headers') or {})

        # Prepare body
        body = options.get('body')
        if body is not None:
            if isinstance(body, (dict, list)):
                body = json.dumps(body).encode('utf-8')
                if not any(name.lower() == 'content-type' for name in headers):
                    headers['Content-Type'] = 'application/json'
            elif isinstance(body, str):
                body = body.encode('utf-8')
            headers['Content-Length'] = str(len(body))

        return Request(method, url, body=body, headers=headers,
                       params=options.get('params'))

    def send(self, request: Request) -> Response:
        """
        Send a request to the Docker daemon

        The response is returned whatever its status code; checking it is
        up to the caller. Socket and protocol errors propagate.

        Args:
            request: Request built by create_request

        Returns:
            Response object
        """
        logger.debug(f"Sending {request.method} {request.full_url} to {self.base_url}")
        conn = self._connection()
        try:
            conn.request(request.method, request.full_url, body=request.body,
                         headers=request.headers)
            raw = conn.getresponse()
            response = Response(
                status_code=raw.status,
                body=raw.read(),
                headers=dict(raw.getheaders()),
                reason=raw.reason
            )
        finally:
            conn.close()

        logger.debug(f"Received {response.status_code} for {request.method} {request.full_url}")
        return response
