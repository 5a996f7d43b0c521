"""
Errors raised by the status client
"""

from typing import Optional


class Q3Error(Exception):
    """Base class for all status query failures."""


class TransportError(Q3Error):
    """
    The UDP exchange failed.

    Attributes:
        stage: Step that failed - 'bind', 'timeout', 'send' or 'receive'
        address: Target (host, port) tuple
    """

    def __init__(self, stage: str, address: tuple, message: str):
        self.stage = stage
        self.address = address
        super().__init__(f"{stage} failed for {address[0]}:{address[1]}: {message}")


class QueryTimeoutError(TransportError):
    """No reply arrived before the read timeout expired."""

    def __init__(self, address: tuple, timeout: float):
        self.timeout = timeout
        super().__init__('receive', address, f"no reply within {timeout}s")


class DecodeError(Q3Error):
    """
    The reply did not have the expected structure.

    Attributes:
        stage: Decoder step that failed - 'lines', 'info' or 'player'
        line: Zero-based reply line number, when known
    """

    def __init__(self, stage: str, message: str, line: Optional[int] = None):
        self.stage = stage
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"{stage}{where}: {message}")
