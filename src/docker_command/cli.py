"""
CLI - command line interface
"""

import argparse
import json
import logging
import shlex
import sys
from typing import List, Optional

from .client import DockerClient
from .command import Command
from .commands import (
    CreateContainer,
    InspectContainer,
    StartContainer,
    StopContainer,
    RemoveContainer
)
from .container import Container
from .exceptions import DockerException, UnexpectedStatusCode
from .settings_manager import SettingsManager

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


class DockerCommandCLI:
    """Docker command CLI interface"""

    def __init__(self, client: DockerClient):
        self.client = client

    def version(self):
        """Print Docker version"""
        print(self.client.version())

    def info(self):
        """Print Docker system info"""
        info = self.client.info()
        print("Docker information:")
        print(f"  Server: {info.get('ServerVersion', 'Unknown')}")
        print(f"  Containers: {info.get('Containers', 'Unknown')}")
        print(f"  Images: {info.get('Images', 'Unknown')}")
        print(f"  OS: {info.get('OperatingSystem', 'Unknown')}")

    def ping(self):
        """Ping the daemon"""
        print(self.client.ping())

    def _build_container(self, image: str, name: Optional[str] = None,
                         command: Optional[str] = None) -> Container:
        config = {'Image': image}
        if command:
            config['Cmd'] = shlex.split(command)
        return Container(config=config, name=name)

    def create_container(self, image: str, name: Optional[str] = None,
                         command: Optional[str] = None) -> Container:
        """Create container"""
        container = self._build_container(image, name, command)
        logger.info(f"Creating container from {image}...")
        self.client.create_container(container)
        logger.info(f"✓ Container created: {container.short_id}")
        print(container.id)
        return container

    def debug_create(self, image: str, name: Optional[str] = None,
                     command: Optional[str] = None):
        """Print the create request without sending it"""
        container = self._build_container(image, name, command)
        print(self.client.debug(CreateContainer(container)))

    def inspect_container(self, container_id: str):
        """Print container details as JSON"""
        attrs = self.client.run(InspectContainer(Container(id=container_id))).value
        print(json.dumps(attrs, indent=2))

    def start_container(self, container_id: str):
        """Start container"""
        self._run(StartContainer(Container(id=container_id)), f"Starting container {container_id}...")
        logger.info(f"✓ Container {container_id} started")

    def stop_container(self, container_id: str, timeout: Optional[int] = None):
        """Stop container"""
        self._run(StopContainer(Container(id=container_id), timeout=timeout),
                  f"Stopping container {container_id}...")
        logger.info(f"✓ Container {container_id} stopped")

    def remove_container(self, container_id: str, force: bool = False):
        """Remove container"""
        self._run(RemoveContainer(Container(id=container_id), force=force),
                  f"Removing container {container_id}...")
        logger.info(f"✓ Container {container_id} removed")

    def _run(self, command: Command, message: str):
        logger.info(message)
        return self.client.run(command)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Docker Engine API commands',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage examples:
  %(prog)s version                                 # Docker version
  %(prog)s create --image alpine --name my-alpine
  %(prog)s debug-create --image alpine             # Show request, do not send
  %(prog)s start --id 3f4e8a
  %(prog)s stop --id 3f4e8a --time 5
  %(prog)s remove --id 3f4e8a --force
"""
    )

    parser.add_argument(
        'action',
        choices=[
            'version', 'info', 'ping', 'create', 'debug-create',
            'inspect', 'start', 'stop', 'remove'
        ],
        help='Action'
    )

    # Connection parameters
    parser.add_argument('--host', help='Docker socket path or tcp://host:port')
    parser.add_argument('--api-version', help='API version, e.g. 1.41')
    parser.add_argument('--timeout', type=int, help='Request timeout in seconds')
    parser.add_argument('--settings', help='Settings file')

    # Container parameters
    parser.add_argument('--image', help='Image name')
    parser.add_argument('--name', help='Container name')
    parser.add_argument('--command', help='Command to run in the container')
    parser.add_argument('--id', help='Container ID')
    parser.add_argument('--force', action='store_true', help='Force removal')
    parser.add_argument('--time', type=int, help='Seconds to wait before killing on stop')

    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def run_cli(argv: Optional[List[str]] = None, client: Optional[DockerClient] = None) -> int:
    """
    Start CLI application

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = SettingsManager(settings_file=args.settings)
    if args.host:
        settings.set('docker_socket_path', args.host)
    if args.api_version:
        settings.set('api_version', args.api_version)
    if args.timeout is not None:
        settings.set('timeout', args.timeout)

    level = 'DEBUG' if args.verbose else str(settings.get('log_level', 'WARNING')).upper()
    logging.getLogger().setLevel(getattr(logging, level, logging.WARNING))

    if args.action in ('create', 'debug-create') and not args.image:
        parser.error(f"{args.action} requires --image")
    if args.action in ('inspect', 'start', 'stop', 'remove') and not args.id:
        parser.error(f"{args.action} requires --id")

    cli = DockerCommandCLI(client or DockerClient.from_settings(settings))

    try:
        if args.action == 'version':
            cli.version()
        elif args.action == 'info':
            cli.info()
        elif args.action == 'ping':
            cli.ping()
        elif args.action == 'create':
            cli.create_container(args.image, name=args.name, command=args.command)
        elif args.action == 'debug-create':
            cli.debug_create(args.image, name=args.name, command=args.command)
        elif args.action == 'inspect':
            cli.inspect_container(args.id)
        elif args.action == 'start':
            cli.start_container(args.id)
        elif args.action == 'stop':
            cli.stop_container(args.id, timeout=args.time)
        elif args.action == 'remove':
            cli.remove_container(args.id, force=args.force)
    except UnexpectedStatusCode as e:
        logger.error(f"Error: {e}")
        if e.response is not None and e.response.body:
            logger.error(e.response.text)
        return 1
    except DockerException as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


def main():
    sys.exit(run_cli())
