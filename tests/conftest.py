"""Shared fixtures: a transport that records requests and replays queued responses."""

import json

import pytest

from docker_command import DockerClient
from docker_command.http_client import DockerHTTPClient, Response


class FakeTransport(DockerHTTPClient):
    """Builds requests like the real client but never opens a connection."""

    def __init__(self):
        super().__init__(base_url='tcp://localhost:2375')
        self.responses = []
        self.sent = []

    def queue(self, status_code, body=None, reason=''):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
        elif isinstance(body, str):
            body = body.encode('utf-8')
        self.responses.append(Response(status_code, body or b'', reason=reason))

    def fail_with(self, error):
        self.responses.append(error)

    def send(self, request):
        self.sent.append(request)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return DockerClient(http=transport)
