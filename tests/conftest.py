"""Shared fixtures for parser and client tests."""

from unittest.mock import MagicMock

import pytest

from hn_client.config import ClientConfig
from hn_client.parsers import document
from hn_client.utils.http_client import HTTPClient
from tests.pages import comment_row, listing_entry, listing_page, post_header, submission_page


@pytest.fixture
def listing_html() -> str:
    """Three stories: upvotable, already upvoted, and a job ad without score or user."""
    return listing_page([
        listing_entry("101", title="First story", url="https://example.com/1"),
        listing_entry("102", title="Second story", url="https://example.com/2",
                      upvote_hidden=True, unvote=True, score="1 point", comments="discuss"),
        listing_entry("103", title="We are hiring", url="item?id=103",
                      upvote=False, score=None, username=None, comments=None),
    ])


@pytest.fixture
def listing_doc(listing_html):
    return document.parse(listing_html)


@pytest.fixture
def submission_html() -> str:
    """Header with 150 points and 3 comments; comment depths 0, 1, 0."""
    return submission_page(
        post_header("200", title="Example", score="150 points", comments="3&nbsp;comments"),
        [
            comment_row("301", depth=0, username="carol"),
            comment_row("302", depth=1, username="dave", upvote_hidden=True, unvote=True),
            comment_row("303", depth=0, username="erin", upvote=False),
        ],
    )


@pytest.fixture
def submission_doc(submission_html):
    return document.parse(submission_html)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url="https://news.ycombinator.com")


@pytest.fixture
def mock_http(config):
    """Transport double with the HTTPClient interface and real URL joining."""
    http = MagicMock(spec=HTTPClient)
    http.config = config
    http.make_url.side_effect = config.make_url
    return http
