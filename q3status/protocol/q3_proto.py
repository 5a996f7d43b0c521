"""
Quake III out-of-band protocol utilities

Builds the ``getstatus`` request and parses the ``statusResponse`` reply.

Reply layout (lines separated by newlines):

    statusResponse
    \\sv_hostname\\MyServer\\g_gametype\\0
    0 48 "^1Alice"
    5 12 "^2Bob"
    <empty trailer>
"""

import logging
from typing import Dict, List, Optional

from q3status.exceptions import DecodeError
from q3status.models import Player, ServerStatus

logger = logging.getLogger(__name__)

# Out-of-band packets start with four 0xFF bytes
OOB_PREFIX = bytes([0xFF, 0xFF, 0xFF, 0xFF])

GETSTATUS_COMMAND = 'getstatus'

INFO_DELIMITER = '\\'
NAME_QUOTE = '"'


def build_status_request() -> bytes:
    """
    Build the status query datagram.

    Returns:
        13 bytes: the out-of-band prefix followed by ``getstatus``,
        no terminator

    Example:
        >>> build_status_request()
        b'\\xff\\xff\\xff\\xffgetstatus'
    """
    return OOB_PREFIX + GETSTATUS_COMMAND.encode('ascii')


def parse_info_string(line: str) -> Dict[str, str]:
    """
    Parse a backslash-delimited info string

    Format: \\key\\value\\key2\\value2

    Args:
        line: Key/value line of the reply

    Returns:
        Dictionary of key-value pairs

    Raises:
        DecodeError: If the line does not start with a delimiter or the
            tokens do not pair up

    Example:
        >>> parse_info_string('\\\\sv_hostname\\\\MyServer\\\\g_gametype\\\\0')
        {'sv_hostname': 'MyServer', 'g_gametype': '0'}
    """
    if not line.startswith(INFO_DELIMITER):
        raise DecodeError('info', f"key/value line must start with '{INFO_DELIMITER}'", line=1)

    # Drop the empty token before the leading delimiter
    parts = line.split(INFO_DELIMITER)[1:]

    if len(parts) % 2 != 0:
        raise DecodeError('info', f"odd number of key/value tokens ({len(parts)})", line=1)

    result = {}
    for i in range(0, len(parts), 2):
        result[parts[i]] = parts[i + 1]

    return result


def parse_player_line(line: str, line_number: Optional[int] = None) -> str:
    """
    Extract the raw player name from a player line.

    The name is the last quoted field on the line. Servers send
    `score ping "name"`; some quote the score too (`"0" "name"`).
    Text outside the quotes is ignored.

    Args:
        line: One player line of the reply
        line_number: Position of the line in the reply, for error messages

    Returns:
        Name with color codes intact

    Raises:
        DecodeError: If the line has no quoted name or the name is empty

    Example:
        >>> parse_player_line('5 48 "^1Alice"')
        '^1Alice'
    """
    parts = line.split(NAME_QUOTE)
    quoted_fields = (len(parts) - 1) // 2
    if quoted_fields < 1:
        raise DecodeError('player', 'missing quoted player name', line=line_number)

    name = parts[2 * quoted_fields - 1]
    if not name:
        raise DecodeError('player', 'empty player name', line=line_number)

    return name


def parse_status_response(data: bytes) -> ServerStatus:
    """
    Decode a ``statusResponse`` datagram.

    Invalid UTF-8 is replaced rather than rejected. The first line is the
    response marker and the last one the trailer; both are skipped, as are
    blank player lines.

    Args:
        data: Raw reply bytes

    Returns:
        Fully populated ServerStatus

    Raises:
        DecodeError: If any part of the reply is malformed
    """
    text = data.decode('utf-8', errors='replace')
    rows = text.split('\n')

    if len(rows) < 2:
        raise DecodeError('lines', f"expected at least 2 lines, got {len(rows)}")

    logger.debug(f"[Q3] Response marker: {rows[0]!r}")

    keys = parse_info_string(rows[1])

    players: List[Player] = []
    for line_number in range(2, len(rows) - 1):
        line = rows[line_number]
        if not line.strip():
            continue
        name = parse_player_line(line, line_number)
        players.append(Player.from_name(name))

    logger.debug(f"[Q3] Decoded {len(keys)} key(s), {len(players)} player(s)")

    return ServerStatus(keys=keys, players=players)
