"""
Main entry point for the Quake III status client

Queries one server and prints its status as JSON:

    q3status -s 127.0.0.1:27960
"""

import argparse
import json
import logging
import sys
from dataclasses import replace

from q3status.client.status_client import Q3Client
from q3status.config import Config
from q3status.exceptions import Q3Error
from q3status.utils.encoding import sanitize_string

logger = logging.getLogger(__name__)


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='q3status',
        description='Query a Quake III server with getstatus and print the result as JSON.',
    )
    parser.add_argument('-s', '--host', default=config.HOST,
                        help='server address, host[:port] (default: $Q3_HOST)')
    parser.add_argument('--read-timeout', type=float, default=config.READ_TIMEOUT,
                        help='seconds to wait for the reply (default: %(default)s)')
    parser.add_argument('--write-timeout', type=float, default=config.WRITE_TIMEOUT,
                        help='seconds to wait for the send (default: %(default)s)')
    parser.add_argument('--clean', action='store_true',
                        help='strip color codes from values and list clean player names only')
    parser.add_argument('--log-level', default=config.LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        type=str.upper, help='log level (default: %(default)s)')
    return parser


def format_status(status, clean: bool = False) -> str:
    """Render a ServerStatus as pretty-printed JSON."""
    if clean:
        payload = {
            'keys': {key: sanitize_string(value) for key, value in status.keys.items()},
            'players': [player.clean_name for player in status.players],
        }
    else:
        payload = status.to_dict()
    return json.dumps(payload, indent=2, ensure_ascii=False)


def main(argv=None) -> int:
    """Main entry point"""

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 2

    parser = build_parser(config)
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.host:
        parser.error('a server address is required (--host or Q3_HOST)')

    try:
        options = replace(
            config.client_options(),
            read_timeout=args.read_timeout,
            write_timeout=args.write_timeout,
        )
        client = Q3Client(args.host, options)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"[CLI] Querying {client.hostname}")

    try:
        status = client.get_status()
    except Q3Error as e:
        logger.debug(f"[CLI] Query failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_status(status, clean=args.clean))
    return 0


if __name__ == '__main__':
    sys.exit(main())
