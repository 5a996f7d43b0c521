"""
Decoded status query results
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from q3status.utils.encoding import sanitize_string


@dataclass(frozen=True)
class Player:
    """
    One entry of the player list.

    Attributes:
        name: Name as sent by the server, color codes included
        clean_name: Name with color codes removed
    """

    name: str
    clean_name: str

    @classmethod
    def from_name(cls, name: str) -> 'Player':
        return cls(name=name, clean_name=sanitize_string(name))

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'clean_name': self.clean_name}


@dataclass(frozen=True)
class ServerStatus:
    """
    Result of one ``getstatus`` query.

    Attributes:
        keys: Server metadata (sv_hostname, mapname, g_gametype...)
        players: Connected players in reply order
    """

    keys: Dict[str, str] = field(default_factory=dict)
    players: List[Player] = field(default_factory=list)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.keys.get(key, default)

    @property
    def hostname(self) -> Optional[str]:
        return self.keys.get('sv_hostname')

    @property
    def clean_hostname(self) -> Optional[str]:
        hostname = self.hostname
        if hostname is None:
            return None
        return sanitize_string(hostname)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        return {
            'keys': dict(self.keys),
            'players': [player.to_dict() for player in self.players],
        }
