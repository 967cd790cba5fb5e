"""Tests for the HTTP transport."""

import pytest

from docker_command.http_client import (
    DockerHTTPClient,
    Request,
    Response,
    UnixHTTPConnection,
    encode_params,
)


class _FakeRawResponse:
    status = 201
    reason = 'Created'

    def read(self):
        return b'{"Id": "abc123"}'

    def getheaders(self):
        return [('Content-Type', 'application/json')]


class _FakeConnection:
    def __init__(self):
        self.requests = []
        self.closed = False

    def request(self, method, url, body=None, headers=None):
        self.requests.append((method, url, body, headers))

    def getresponse(self):
        return _FakeRawResponse()

    def close(self):
        self.closed = True


def test_base_url_parsing():
    assert DockerHTTPClient('unix:///tmp/docker.sock').socket_path == '/tmp/docker.sock'
    assert DockerHTTPClient('/tmp/docker.sock').socket_path == '/tmp/docker.sock'

    tcp = DockerHTTPClient('tcp://10.0.0.5:2376')
    assert (tcp.host, tcp.port, tcp.socket_path) == ('10.0.0.5', 2376, None)
    assert tcp.base_url == 'tcp://10.0.0.5:2376'

    assert DockerHTTPClient('http://docker').port == 2375


def test_create_request_json_body():
    http = DockerHTTPClient('unix:///tmp/docker.sock')
    request = http.create_request('post', '/containers/create', {'body': {'Image': 'alpine'}})

    assert request.method == 'POST'
    assert request.body == b'{"Image": "alpine"}'
    assert request.headers['Content-Type'] == 'application/json'
    assert request.headers['Content-Length'] == str(len(request.body))
    assert request.headers['Host'] == 'localhost'


def test_create_request_without_options():
    request = DockerHTTPClient('unix:///tmp/docker.sock').create_request('GET', '/version')
    assert request.body is None
    assert 'Content-Length' not in request.headers


def test_encode_params():
    assert encode_params(None) == ''
    assert encode_params({'all': True, 'limit': 3, 'since': None}) == 'all=true&limit=3'
    assert encode_params({'filters': {'status': ['running']}}) == \
        'filters=%7B%22status%22%3A%20%5B%22running%22%5D%7D'


def test_request_str():
    request = Request('POST', '/v1.12/containers/create', body=b'{}',
                      headers={'content-type': 'application/json'})
    assert str(request) == (
        'POST /v1.12/containers/create HTTP/1.1\r\n'
        'content-type: application/json\r\n'
        '\r\n'
        '{}'
    )


def test_response_json_and_text():
    response = Response(200, b'{"Version": "1.6.0"}')
    assert response.json() == {'Version': '1.6.0'}
    assert response.text == '{"Version": "1.6.0"}'

    with pytest.raises(ValueError):
        Response(200, b'<html>').json()


def test_send_returns_response_and_closes_connection(monkeypatch):
    http = DockerHTTPClient('unix:///tmp/docker.sock')
    connection = _FakeConnection()
    monkeypatch.setattr(http, '_connection', lambda: connection)

    request = http.create_request('POST', '/containers/create',
                                  {'body': {'Image': 'alpine'}, 'params': {'name': 'web'}})
    response = http.send(request)

    assert response.status_code == 201
    assert response.reason == 'Created'
    assert response.json() == {'Id': 'abc123'}
    assert response.headers == {'Content-Type': 'application/json'}
    method, url, body, _ = connection.requests[0]
    assert (method, url, body) == ('POST', '/containers/create?name=web', b'{"Image": "alpine"}')
    assert connection.closed


def test_send_missing_socket(tmp_path):
    http = DockerHTTPClient(str(tmp_path / 'missing.sock'))
    with pytest.raises(FileNotFoundError):
        http.send(http.create_request('GET', '/version'))


def test_connection_types(tmp_path):
    socket_path = tmp_path / 'docker.sock'
    socket_path.touch()
    assert isinstance(DockerHTTPClient(str(socket_path))._connection(), UnixHTTPConnection)

    connection = DockerHTTPClient('tcp://127.0.0.1:2375')._connection()
    assert not isinstance(connection, UnixHTTPConnection)
    assert (connection.host, connection.port) == ('127.0.0.1', 2375)
