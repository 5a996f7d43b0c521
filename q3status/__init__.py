"""
Quake III status query client
"""

from q3status.client.status_client import Q3Client, Q3ClientOptions, get_status
from q3status.exceptions import DecodeError, Q3Error, QueryTimeoutError, TransportError
from q3status.models import Player, ServerStatus
from q3status.utils.encoding import sanitize_string

__version__ = "0.1.0"

__all__ = [
    'Q3Client',
    'Q3ClientOptions',
    'get_status',
    'Player',
    'ServerStatus',
    'sanitize_string',
    'Q3Error',
    'TransportError',
    'QueryTimeoutError',
    'DecodeError',
]
