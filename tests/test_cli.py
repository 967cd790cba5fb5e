"""Tests for the command line interface."""

import json

import pytest

from docker_command import Container, DockerClient, cli
from docker_command.cli import run_cli


@pytest.fixture
def settings_args(tmp_path):
    return ['--settings', str(tmp_path / 'settings.json')]


def test_version(client, transport, settings_args, capsys):
    transport.queue(200, {'Version': '24.0.7'})

    assert run_cli(['version'] + settings_args, client=client) == 0
    assert capsys.readouterr().out.strip() == '24.0.7'


def test_create(client, transport, settings_args, capsys):
    transport.queue(201, {'Id': 'abc123'})

    code = run_cli(['create', '--image', 'alpine', '--name', 'web',
                    '--command', 'sleep 60'] + settings_args, client=client)

    assert code == 0
    assert capsys.readouterr().out.strip() == 'abc123'
    assert transport.sent[0].body == b'{"Image": "alpine", "Cmd": ["sleep", "60"]}'


def test_debug_create_sends_nothing(client, transport, settings_args, capsys):
    assert run_cli(['debug-create', '--image', 'alpine'] + settings_args, client=client) == 0
    assert 'POST /containers/create HTTP/1.1' in capsys.readouterr().out
    assert transport.sent == []


def test_unexpected_status_exits_with_error(client, transport, settings_args, caplog):
    transport.queue(404, {'message': 'No such container: abc123'})

    assert run_cli(['start', '--id', 'abc123'] + settings_args, client=client) == 1
    assert 'No such container' in caplog.text


def test_transport_error_exits_with_error(client, transport, settings_args):
    transport.fail_with(ConnectionRefusedError('refused'))
    assert run_cli(['ping'] + settings_args, client=client) == 1


def test_missing_id_is_usage_error(client, settings_args):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(['stop'] + settings_args, client=client)
    assert excinfo.value.code == 2


def test_stop_and_remove(client, transport, settings_args):
    transport.queue(204)
    transport.queue(204)

    assert run_cli(['stop', '--id', 'abc123', '--time', '3'] + settings_args, client=client) == 0
    assert run_cli(['remove', '--id', 'abc123', '--force'] + settings_args, client=client) == 0
    assert [r.full_url for r in transport.sent] == [
        '/containers/abc123/stop?t=3',
        '/containers/abc123?force=true&v=false',
    ]


def test_inspect(client, transport, settings_args, capsys):
    transport.queue(200, {'Id': 'abc123', 'Name': '/web', 'State': {'Status': 'running'}})

    assert run_cli(['inspect', '--id', 'abc123'] + settings_args, client=client) == 0

    assert transport.sent[0].url == '/containers/abc123/json'
    assert json.loads(capsys.readouterr().out)['State'] == {'Status': 'running'}


def test_build_failure_exits_with_error(client, transport, settings_args, monkeypatch):
    monkeypatch.setattr(cli.DockerCommandCLI, '_build_container',
                        lambda self, image, name=None, command=None:
                        Container(config={'Image': image, 'Labels': {1, 2}}))

    assert run_cli(['create', '--image', 'alpine'] + settings_args, client=client) == 1
    assert transport.sent == []


def test_zero_timeout_is_honoured(transport, settings_args, monkeypatch):
    seen = {}

    class _RecordingClient:
        @staticmethod
        def from_settings(settings):
            seen['timeout'] = settings.get('timeout')
            return DockerClient(http=transport)

    monkeypatch.setattr(cli, 'DockerClient', _RecordingClient)

    assert run_cli(['debug-create', '--image', 'alpine', '--timeout', '0'] + settings_args) == 0
    assert seen['timeout'] == 0
