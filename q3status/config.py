"""
Configuration for the Quake III status client
"""

import os

from dotenv import load_dotenv

from q3status.client.status_client import Q3ClientOptions

# Load environment variables
load_dotenv()


class Config:
    """Client configuration"""

    def __init__(self):
        # Default target when none is given on the command line
        self.HOST = os.getenv('Q3_HOST') or None

        # Timeouts (seconds)
        self.READ_TIMEOUT = float(os.getenv('Q3_READ_TIMEOUT', '5'))
        self.WRITE_TIMEOUT = float(os.getenv('Q3_WRITE_TIMEOUT', '5'))

        # Receive buffer (bytes)
        self.MAX_RESPONSE_SIZE = int(os.getenv('Q3_MAX_RESPONSE_SIZE', '65535'))

        # Logging
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')

    @classmethod
    def from_env(cls):
        """Create config from environment"""
        return cls()

    def client_options(self) -> Q3ClientOptions:
        return Q3ClientOptions(
            read_timeout=self.READ_TIMEOUT,
            write_timeout=self.WRITE_TIMEOUT,
            max_response_size=self.MAX_RESPONSE_SIZE,
        )

    def __repr__(self):
        return f"<Config HOST={self.HOST} READ={self.READ_TIMEOUT}s WRITE={self.WRITE_TIMEOUT}s>"
