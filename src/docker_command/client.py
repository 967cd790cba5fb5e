"""
Docker Client - Main API entry point
"""

import logging
from typing import Optional

from .http_client import DockerHTTPClient
from .command import Command, CommandOutput
from .container import Container
from .commands import Version, Info, Ping, CreateContainer

logger = logging.getLogger(__name__)


class DockerClient:
    """
    Docker API Client
    Runs commands through an HTTP transport
    """
    
    def __init__(self, base_url: Optional[str] = None, api_version: Optional[str] = None,
                 timeout: int = 60, http=None):
        """
        Initialize Docker client
        
        Args:
            base_url: Docker socket path or tcp:// address (default: auto-detect)
            api_version: Default API version used as URL prefix (default: none)
            timeout: Request timeout in seconds
            http: Transport to use instead of DockerHTTPClient
        """
        self.http = http if http is not None else DockerHTTPClient(base_url=base_url, timeout=timeout)
        self.api_version = api_version
    
    @classmethod
    def from_settings(cls, settings) -> 'DockerClient':
        """Create a client from a SettingsManager"""
        return cls(
            base_url=settings.get('docker_socket_path') or None,
            api_version=settings.get('api_version') or None,
            timeout=settings.get('timeout', 60)
        )
    
    def run(self, command: Command, api_version: Optional[str] = None) -> CommandOutput:
        """Run a command and return its output"""
        logger.debug(f"Running {command!r}")
        return command.run(self, api_version=api_version)
    
    def debug(self, command: Command, api_version: Optional[str] = None) -> str:
        """Render the request a command would send"""
        return command.debug(self, api_version=api_version)
    
    def version(self) -> str:
        """Get Docker version"""
        return self.run(Version()).value
    
    def info(self) -> dict:
        """Get Docker system info"""
        return self.run(Info()).value
    
    def ping(self) -> str:
        """Ping Docker daemon"""
        return self.run(Ping()).value
    
    def create_container(self, container: Container) -> Container:
        """Create a container and assign its new id"""
        self.run(CreateContainer(container))
        return container
    