"""
Docker Engine API commands
"""

from .system import Version, Info, Ping
from .containers import (
    CreateContainer,
    InspectContainer,
    StartContainer,
    StopContainer,
    RemoveContainer
)

__all__ = [
    'Version',
    'Info',
    'Ping',
    'CreateContainer',
    'InspectContainer',
    'StartContainer',
    'StopContainer',
    'RemoveContainer'
]
