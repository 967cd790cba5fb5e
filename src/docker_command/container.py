"""
Container domain object
"""

from typing import Any, Dict, Optional


class Container:
    """
    Caller-owned container holder

    Commands read the creation config from it and write back what the
    daemon returns (the new id, inspect data).
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 name: Optional[str] = None, id: Optional[str] = None):
        self.config = dict(config or {})
        self.name = name
        self.id = id
        self.attrs: Dict[str, Any] = {}
    
    @property
    def short_id(self) -> str:
        return self.id[:12] if self.id else ''
    
    @property
    def status(self) -> str:
        state = self.attrs.get('State', {})
        if isinstance(state, dict):
            return state.get('Status', 'unknown')
        return 'unknown'
    
    def set_id(self, container_id: str):
        """Assign the id given by the daemon"""
        self.id = container_id
    
    def __repr__(self):
        return f"<Container: {self.name or self.short_id or self.config.get('Image', '')}>"
