"""
Quake III Status Client

Queries a game server over its out-of-band UDP channel.

Protocol: UDP
Port: 27960 (default)

Communication Flow:
1. Client binds an ephemeral UDP port
2. Client sends 0xFF 0xFF 0xFF 0xFF "getstatus"
3. Server replies with a single "statusResponse" datagram
4. Reply is decoded into a ServerStatus
"""

import logging
import math
import socket
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from q3status.exceptions import QueryTimeoutError, TransportError
from q3status.models import ServerStatus
from q3status.protocol.q3_proto import build_status_request, parse_status_response


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_PORT = 27960
DEFAULT_TIMEOUT = 5.0  # seconds

# Largest UDP payload, so replies are never cut short
DEFAULT_MAX_RESPONSE_SIZE = 65535

BIND_ADDRESSES = {
    socket.AF_INET: ('0.0.0.0', 0),
    socket.AF_INET6: ('::', 0),
}

logger = logging.getLogger(__name__)


# =============================================================================
# Options & Addressing
# =============================================================================

@dataclass(frozen=True)
class Q3ClientOptions:
    """
    Timeouts and limits for one client.

    Attributes:
        read_timeout: Seconds to wait for the reply
        write_timeout: Seconds to wait for the request to be sent
        max_response_size: Receive buffer size in bytes
    """

    read_timeout: float = DEFAULT_TIMEOUT
    write_timeout: float = DEFAULT_TIMEOUT
    max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE

    def __post_init__(self):
        for timeout in (self.read_timeout, self.write_timeout):
            if not math.isfinite(timeout) or timeout <= 0:
                raise ValueError("timeouts must be positive and finite")
        if self.max_response_size <= 0:
            raise ValueError("max_response_size must be positive")


Address = Union[str, Tuple[str, int]]


def parse_address(target: Address) -> Tuple[str, int]:
    """
    Split a target into a (host, port) tuple.

    Accepts "host:port", "[ipv6]:port", a bare host (default port) or an
    already split tuple.

    Args:
        target: Server address

    Returns:
        (host, port) tuple

    Raises:
        ValueError: If the port is not a number in 1-65535 or the host is empty

    Example:
        >>> parse_address('127.0.0.1:27961')
        ('127.0.0.1', 27961)
        >>> parse_address('[::1]:27960')
        ('::1', 27960)
    """
    if isinstance(target, tuple):
        host, port = target
    elif target.startswith('['):
        host, sep, rest = target[1:].partition(']')
        if not sep:
            raise ValueError(f"Invalid address: {target!r}")
        if rest:
            if not rest.startswith(':'):
                raise ValueError(f"Invalid address: {target!r}")
            port = rest[1:]
        else:
            port = DEFAULT_PORT
    elif target.count(':') == 1:
        host, port = target.split(':')
    else:
        # Bare hostname, or an unbracketed IPv6 literal
        host, port = target, DEFAULT_PORT

    try:
        port = int(port)
    except ValueError:
        raise ValueError(f"Invalid port in address: {target!r}")

    if not host:
        raise ValueError(f"Missing host in address: {target!r}")
    if not (1 <= port <= 65535):
        raise ValueError(f"Port out of range in address: {target!r}")

    return host, port


# =============================================================================
# Transport
# =============================================================================

def query(address: Tuple[str, int], options: Q3ClientOptions) -> bytes:
    """
    Perform one request/reply exchange.

    The socket lives only for this call and is closed on every exit path.

    Args:
        address: Target (host, port) tuple
        options: Timeouts and receive buffer size

    Returns:
        Reply bytes, trimmed to the received length

    Raises:
        TransportError: If bind, timeout setup, send or receive fails
        QueryTimeoutError: If no reply arrives within read_timeout
    """
    family = socket.AF_INET6 if ':' in address[0] else socket.AF_INET

    try:
        sock = socket.socket(family, socket.SOCK_DGRAM)
    except OSError as e:
        raise TransportError('bind', address, str(e)) from e

    with sock:
        try:
            sock.bind(BIND_ADDRESSES[family])
        except OSError as e:
            raise TransportError('bind', address, str(e)) from e

        # One timeout per socket: write timeout for the send, read for the receive
        _set_timeout(sock, options.write_timeout, address)

        request = build_status_request()
        try:
            sock.sendto(request, address)
        except OSError as e:
            raise TransportError('send', address, str(e)) from e

        logger.debug(f"[Q3] Sent {len(request)} bytes to {address[0]}:{address[1]}")

        _set_timeout(sock, options.read_timeout, address)

        try:
            data, addr = sock.recvfrom(options.max_response_size)
        except socket.timeout as e:
            raise QueryTimeoutError(address, options.read_timeout) from e
        except OSError as e:
            raise TransportError('receive', address, str(e)) from e

    logger.debug(f"[Q3] Received {len(data)} bytes from {addr}")

    if len(data) >= options.max_response_size:
        logger.debug(f"[Q3] Reply filled the {options.max_response_size}-byte buffer and may be truncated")

    return data


def _set_timeout(sock: socket.socket, timeout: float, address: Tuple[str, int]):
    try:
        sock.settimeout(timeout)
    except (OSError, ValueError, OverflowError) as e:
        raise TransportError('timeout', address, str(e)) from e


# =============================================================================
# Client
# =============================================================================

class Q3Client:
    """
    Status client bound to one server.

    Holds no socket between calls, so ``get_status`` can be called any
    number of times.
    """

    def __init__(self, hostname: Address, options: Optional[Q3ClientOptions] = None):
        """
        Initialize client.

        Args:
            hostname: Server address ("host:port", "[ipv6]:port", bare host
                or (host, port) tuple)
            options: Timeouts; defaults to 5 seconds each

        Raises:
            ValueError: If the address cannot be parsed
        """
        self.address = parse_address(hostname)
        self.options = options or Q3ClientOptions()

    @property
    def hostname(self) -> str:
        host, port = self.address
        if ':' in host:
            return f"[{host}]:{port}"
        return f"{host}:{port}"

    def get_status(self) -> ServerStatus:
        """
        Query the server once.

        Returns:
            Decoded ServerStatus

        Raises:
            TransportError: If the exchange fails
            DecodeError: If the reply is malformed
        """
        data = query(self.address, self.options)
        return parse_status_response(data)

    def __repr__(self):
        return f"<Q3Client {self.hostname} read={self.options.read_timeout}s write={self.options.write_timeout}s>"


def get_status(hostname: Address, options: Optional[Q3ClientOptions] = None) -> ServerStatus:
    """Query a server without keeping a client around."""
    return Q3Client(hostname, options).get_status()
