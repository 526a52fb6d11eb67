#!/usr/bin/env python3
"""
Hacker News client - Main entry point.

Read listings and comment threads, or vote from the command line.
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .client import AuthenticatedSession, AuthMode, Client
from .config import ClientConfig
from .exceptions import HNClientError


def setup_logging(log_dir: Optional[Path] = None, verbose: bool = False):
    """Configure logging."""
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"hn_client_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        handlers.append(logging.FileHandler(log_file))

    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    # Reduce noise from external libraries
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)

    return logging.getLogger(__name__)


def read_credentials(args: argparse.Namespace) -> Tuple[str, str]:
    """
    Credentials from --user/--password, falling back to HN_CREDENTIALS.

    HN_CREDENTIALS holds "user:password".
    """
    if args.user and args.password:
        return args.user, args.password

    creds = os.environ.get('HN_CREDENTIALS', '')
    user, sep, password = creds.partition(':')
    if not sep or not user or not password:
        raise SystemExit("No credentials: pass --user and --password or set HN_CREDENTIALS=user:password")
    return user, password


def non_negative_int(value: str) -> int:
    """argparse type for page indices."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hacker News client - read posts and comments, vote"
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to YAML config file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose logging'
    )

    parser.add_argument(
        '--strict-tree',
        action='store_true',
        help='Fail on comments whose indentation has no parent'
    )

    parser.add_argument(
        '--skip-malformed',
        action='store_true',
        help='Skip listing rows that cannot be parsed instead of failing'
    )

    parser.add_argument('--user', '-u', type=str, help='Account name for authenticated commands')
    parser.add_argument('--password', '-p', type=str, help='Account password')

    subparsers = parser.add_subparsers(dest='command', required=True)

    top = subparsers.add_parser('top', help='Print posts from the front page listing')
    top.add_argument('--page', type=non_negative_int, default=1, help='Listing page (default: 1)')

    item = subparsers.add_parser('item', help='Print a submission with its comment tree')
    item.add_argument('id', type=str, help='Submission id')

    vote = subparsers.add_parser('vote', help='Vote on a submission')
    vote.add_argument('id', type=str, help='Submission id')
    vote.add_argument('--down', action='store_true', help='Remove an earlier upvote')

    login = subparsers.add_parser('login', help='Check credentials by logging in')
    login.add_argument('--signup', action='store_true', help='Create the account instead')

    return parser


def run(args: argparse.Namespace, config: ClientConfig) -> int:
    """Execute one command. Returns the process exit status."""
    logger = logging.getLogger(__name__)

    if args.command == 'top':
        posts = Client(config).fetch_listing(args.page)
        print(json.dumps([p.to_dict() for p in posts], indent=2))
        return 0

    if args.command == 'item':
        post = Client(config).fetch_submission(args.id)
        print(post.to_json())
        return 0

    user, password = read_credentials(args)

    if args.command == 'login':
        mode = AuthMode.SIGNUP if args.signup else AuthMode.LOGIN
        AuthenticatedSession.authenticate(user, password, mode, config)
        print(f"Authenticated as {user}")
        return 0

    # vote
    session = AuthenticatedSession.authenticate(user, password, AuthMode.LOGIN, config)
    post = session.fetch_submission(args.id)

    if post.vote is None or post.vote.is_upvote == args.down:
        wanted = "unvote" if args.down else "upvote"
        logger.error(f"No {wanted} link on submission {args.id}")
        return 1

    ack = session.cast_vote(post.vote)
    print(f"Voted {post.vote.direction.value} on {args.id} ({ack.status_code})")
    return 0


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Create config
    if args.config:
        config = ClientConfig.from_yaml(args.config)
    else:
        config = ClientConfig()

    # Apply command line overrides
    if args.strict_tree:
        config.strict_tree = True
    if args.skip_malformed:
        config.skip_malformed_rows = True

    logger = setup_logging(config.logs_dir, args.verbose)

    try:
        return run(args, config)
    except HNClientError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
