"""
Public client for reading and voting on Hacker News.
"""

import logging
from enum import Enum
from typing import List, Optional

from .config import ClientConfig
from .exceptions import AuthError
from .models import Ack, Post, VoteAction
from .parsers import document
from .parsers.fields import extract_notice
from .parsers.html_parser import PageParser
from .utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class AuthMode(Enum):
    LOGIN = "login"
    SIGNUP = "signup"


class Client:
    """Unauthenticated client. See AuthenticatedSession for voting."""

    def __init__(self, config: Optional[ClientConfig] = None, http: Optional[HTTPClient] = None):
        self.config = config or ClientConfig()
        self.http = http or HTTPClient(self.config)
        self.parser = PageParser(
            skip_malformed_rows=self.config.skip_malformed_rows,
            strict_tree=self.config.strict_tree,
        )

    def fetch_listing(self, page: int = 1) -> List[Post]:
        """
        Get the posts on one page of the front page listing.

        Args:
            page: Listing page index, non-negative

        Returns:
            Posts in ranking order, without comments

        Raises:
            TransportError: If the page could not be fetched
            ExtractionError: If the page could not be parsed
        """
        if page < 0:
            raise ValueError(f"page must be non-negative, got {page}")

        logger.info(f"Fetching listing page {page}")
        content = self.http.fetch_document(f"{self.config.listing_path}?p={page}")
        return self.parser.build_listing(document.parse(content))

    def fetch_submission(self, post_id: str) -> Post:
        """
        Get a single post with its comment tree.

        Raises:
            TransportError: If the page could not be fetched
            ExtractionError: If the header or any comment could not be parsed
        """
        logger.info(f"Fetching submission {post_id}")
        content = self.http.fetch_document(f"{self.config.item_path}?id={post_id}")
        return self.parser.build_submission(post_id, document.parse(content))


class AuthenticatedSession:
    """
    A logged-in account.

    Wraps a Client whose cookie jar holds the session, forwards its read
    operations and adds voting. Vote links on pages read through this
    session carry the session's auth token.
    """

    def __init__(self, client: Client, username: str):
        self.client = client
        self.username = username

    @classmethod
    def authenticate(
        cls,
        username: str,
        password: str,
        mode: AuthMode = AuthMode.LOGIN,
        config: Optional[ClientConfig] = None,
        http: Optional[HTTPClient] = None,
    ) -> "AuthenticatedSession":
        """
        Log in to an existing account or create a new one.

        Args:
            username: Account name
            password: Account password
            mode: AuthMode.LOGIN or AuthMode.SIGNUP
            config: Client configuration
            http: Transport to use; a fresh one (empty cookie jar) by default

        Returns:
            Session bound to the account

        Raises:
            AuthError: If the site did not redirect to the landing page
            TransportError: If a request failed
        """
        client = Client(config, http)
        config = client.config

        # Seeds the cookies the login form expects
        client.http.fetch_document(f"{config.login_path}?goto={config.landing_path}")

        fields = {
            "goto": config.landing_path,
            "acct": username,
            "pw": password,
        }
        if mode is AuthMode.SIGNUP:
            fields["creating"] = "t"

        final_url, content = client.http.submit_form(config.login_path, fields)

        if final_url != config.landing_url:
            detail = extract_notice(document.parse(content)) if content else None
            action = "Login" if mode is AuthMode.LOGIN else "Signup"
            logger.warning(f"{action} failed for {username}, landed on {final_url}")
            raise AuthError(f"{action} failed", username, detail)

        logger.info(f"Authenticated as {username} ({mode.value})")
        return cls(client, username)

    def fetch_listing(self, page: int = 1) -> List[Post]:
        return self.client.fetch_listing(page)

    def fetch_submission(self, post_id: str) -> Post:
        return self.client.fetch_submission(post_id)

    def cast_vote(self, action: VoteAction) -> Ack:
        """
        Up- or unvote a post or comment.

        Args:
            action: Vote link taken from a Post or Comment read by this session

        Raises:
            TransportError: If the site rejected the request
        """
        logger.info(f"Casting {action.direction.value}vote as {self.username}")
        return self.client.http.perform_action(action.url)


def authenticate(
    username: str,
    password: str,
    mode: AuthMode = AuthMode.LOGIN,
    config: Optional[ClientConfig] = None,
) -> AuthenticatedSession:
    """Shortcut for AuthenticatedSession.authenticate."""
    return AuthenticatedSession.authenticate(username, password, mode, config)
