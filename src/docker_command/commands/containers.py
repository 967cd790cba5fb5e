"""
Container commands
"""

import logging
from typing import Any, Dict, Optional

from ..command import Command, Method, Veto
from ..container import Container

logger = logging.getLogger(__name__)


class CreateContainer(Command):
    """
    Create a container from container.config

    The id returned by the daemon is assigned to the container.
    """

    path = '/containers/create'
    method = Method.POST
    expected_status_code = 201
    min_version = '1.12'
    max_version = '1.12'

    def __init__(self, container: Container):
        self.container = container

    def get_options(self) -> Dict[str, Any]:
        options = {
            'body': self.container.config,
            'headers': {'content-type': 'application/json'}
        }
        if self.container.name:
            options['params'] = {'name': self.container.name}
        return options

    def after_send(self, response):
        self.container.set_id(response.json()['Id'])
        logger.debug(f"Created container {self.container.short_id}")
        return True


class _ContainerCommand(Command):
    """Command addressing an existing container by id"""

    path_template = ''

    def __init__(self, container: Container):
        self.container = container

    @property
    def path(self):
        return self.path_template.format(id=self.container.id or '')

    def before_send(self, request):
        if not self.container.id:
            return Veto("container has no id")
        return True


class InspectContainer(_ContainerCommand):
    """Low-level information on a container, stored in container.attrs"""

    path_template = '/containers/{id}/json'
    method = Method.GET
    expected_status_code = 200

    def after_send(self, response):
        attrs = response.json()
        self.container.attrs = attrs
        name = attrs.get('Name')
        if name:
            self.container.name = name.lstrip('/')
        return attrs


class StartContainer(_ContainerCommand):
    path_template = '/containers/{id}/start'
    method = Method.POST
    expected_status_code = 204


class StopContainer(_ContainerCommand):
    path_template = '/containers/{id}/stop'
    method = Method.POST
    expected_status_code = 204

    def __init__(self, container: Container, timeout: Optional[int] = None):
        super().__init__(container)
        self.timeout = timeout

    def get_options(self) -> Dict[str, Any]:
        if self.timeout is None:
            return {}
        return {'params': {'t': self.timeout}}


class RemoveContainer(_ContainerCommand):
    path_template = '/containers/{id}'
    method = Method.DELETE
    expected_status_code = 204

    def __init__(self, container: Container, force: bool = False, v: bool = False):
        super().__init__(container)
        self.force = force
        self.v = v

    def get_options(self) -> Dict[str, Any]:
        return {'params': {'force': self.force, 'v': self.v}}

    def after_send(self, response):
        self.container.id = None
        return True
