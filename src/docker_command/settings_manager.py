"""
Settings Manager
Settings stored in a JSON file, overridden by environment variables
"""

import json
import os
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    'docker_socket_path': '',
    'api_version': '',
    'timeout': 60,
    'log_level': 'WARNING',
}

# Environment variable -> setting key
ENV_OVERRIDES = {
    'DOCKER_HOST': 'docker_socket_path',
    'DOCKER_API_VERSION': 'api_version',
}


class SettingsManager:
    """Manager for client settings"""
    
    @staticmethod
    def get_user_settings_path() -> str:
        """Get path to user settings file"""
        if os.name == 'nt':  # Windows
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # macOS, Linux
            base_dir = os.environ.get('XDG_DATA_HOME', os.path.expanduser('~/.local/share'))
        return os.path.join(base_dir, 'docker-command', 'settings.json')
    
    def __init__(self, settings_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize settings manager
        
        Args:
            settings_file: JSON settings file (default: user settings path)
            environ: Environment mapping (default: os.environ)
        """
        self.settings_file = settings_file or self.get_user_settings_path()
        self.environ = os.environ if environ is None else environ
        self.settings: Dict[str, Any] = {}
        
        self.load()
    
    def load(self):
        """Load settings from file and environment"""
        self.settings = DEFAULT_SETTINGS.copy()
        
        if os.path.exists(self.settings_file):
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if isinstance(loaded_settings, dict):
                    self.settings.update(loaded_settings)
                else:
                    logger.warning(f"Ignoring settings file {self.settings_file}: not a JSON object")
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Could not load settings from {self.settings_file}: {e}")
        
        for env_name, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value:
                self.settings[key] = value
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get setting value"""
        return self.settings.get(key, default)
    
    def set(self, key: str, value: Any):
        """Set setting value"""
        self.settings[key] = value
