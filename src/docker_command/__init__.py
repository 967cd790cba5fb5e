"""
Docker Engine API commands
Each command is one request/response exchange with the Docker daemon
"""

from .client import DockerClient
from .command import (
    Command,
    CommandDescriptor,
    CommandOutput,
    Method,
    Veto,
    build_url,
    check_status_code,
    run_command,
    debug_command
)
from .container import Container
from .exceptions import (
    DockerException,
    RequestCanceled,
    ResponseNotValid,
    UnexpectedStatusCode
)

__all__ = [
    'DockerClient',
    'Command',
    'CommandDescriptor',
    'CommandOutput',
    'Method',
    'Veto',
    'build_url',
    'check_status_code',
    'run_command',
    'debug_command',
    'Container',
    'DockerException',
    'RequestCanceled',
    'ResponseNotValid',
    'UnexpectedStatusCode'
]

__version__ = '1.0.0'
