"""
HTML parsing for listing and submission pages.
"""

import logging
from typing import List

from bs4 import BeautifulSoup, Tag

from ..exceptions import ExtractionError, MissingField
from ..models import Comment, Post
from . import document
from .fields import (
    extract_age,
    extract_comment_count,
    extract_content_html,
    extract_depth,
    extract_downvote,
    extract_score,
    extract_story_link,
    extract_upvote,
    extract_username,
    extract_vote,
)
from .tree import build_tree

logger = logging.getLogger(__name__)

# Shown in place of a submitter the page does not name
UNKNOWN_USERNAME = "<unknown>"


def _element_id(element: Tag) -> str:
    element_id = document.attr(element, 'id')
    if not element_id:
        raise MissingField("id")
    return element_id


def assemble_post(row: Tag, action_row: Tag) -> Post:
    """
    Build a listing Post from its title row and the action row below it.

    Id, title and url are required. Username, score and comment count fall
    back to defaults, since job ads and fresh stories legitimately lack them.
    """
    post_id = _element_id(row)
    title, url = extract_story_link(row)

    try:
        username = extract_username(action_row)
    except ExtractionError:
        username = UNKNOWN_USERNAME

    try:
        score = extract_score(action_row)
    except ExtractionError:
        score = 0

    try:
        comment_count = extract_comment_count(action_row)
    except ExtractionError:
        comment_count = 0

    return Post(
        id=post_id,
        title=title,
        url=url,
        username=username,
        score=score,
        comment_count=comment_count,
        comments=[],
        vote=extract_vote(row, action_row),
    )


def assemble_header(post_id: str, header: Tag) -> Post:
    """
    Build the Post at the top of a submission page, without its comments.

    Same fallbacks as a listing row except the comment count, which is
    required here. Score, submitter, comment count and unvote link are read
    from the subtext row only; the header also holds the user-written text
    of Ask HN posts, whose links must not count.
    """
    story_row = document.select_one(header, 'story_row')
    if story_row is None:
        story_row = header
    subtext = document.select_one(header, 'subtext')
    if subtext is None:
        raise MissingField("action_row")

    title, url = extract_story_link(story_row)

    try:
        username = extract_username(subtext)
    except ExtractionError:
        username = UNKNOWN_USERNAME

    try:
        score = extract_score(subtext)
    except ExtractionError:
        score = 0

    return Post(
        id=post_id,
        title=title,
        url=url,
        username=username,
        score=score,
        comment_count=extract_comment_count(subtext),
        comments=[],
        vote=extract_vote(story_row, subtext),
    )


def assemble_comment(element: Tag) -> Comment:
    """
    Build one Comment from its row. Every field except the vote links is
    required; children are left empty for build_tree to fill.
    """
    username = extract_username(element)
    comment_id = _element_id(element)
    depth = extract_depth(element)
    age = extract_age(element)
    content_html = extract_content_html(element)

    vote_links = document.select_one(element, 'vote_links')
    upvote = extract_upvote(vote_links) if vote_links is not None else None
    downvote = extract_downvote(vote_links) if vote_links is not None else None

    return Comment(
        id=comment_id,
        depth=depth,
        age=age,
        username=username,
        content_html=content_html,
        children=[],
        upvote=upvote,
        downvote=downvote,
    )


class PageParser:
    """Parser for Hacker News listing and submission pages."""

    def __init__(self, skip_malformed_rows: bool = False, strict_tree: bool = False):
        """
        Args:
            skip_malformed_rows: Drop listing rows that fail to assemble
                instead of failing the whole listing
            strict_tree: Fail on comments whose depth has no parent
                instead of re-leveling them
        """
        self.skip_malformed_rows = skip_malformed_rows
        self.strict_tree = strict_tree

    def build_listing(self, doc: BeautifulSoup) -> List[Post]:
        """
        Parse every story on a listing page.

        Args:
            doc: Parsed listing page

        Returns:
            Posts in page order, all with empty comment lists

        Raises:
            ExtractionError: A row failed and skip_malformed_rows is off
        """
        posts = []

        for row in document.select(doc, 'listing_row'):
            try:
                action_row = document.next_sibling(row)
                if action_row is None:
                    raise MissingField("action_row")
                posts.append(assemble_post(row, action_row))
            except ExtractionError as e:
                if not self.skip_malformed_rows:
                    raise
                logger.warning(f"Skipping listing row {document.attr(row, 'id')}: {e}")

        logger.debug(f"Parsed {len(posts)} posts from listing")
        return posts

    def build_submission(self, post_id: str, doc: BeautifulSoup) -> Post:
        """
        Parse a submission page into its Post and comment tree.

        Args:
            post_id: Id the page was requested with
            doc: Parsed submission page

        Returns:
            Post whose comments are the root comments, replies nested

        Raises:
            ExtractionError: The header or any single comment failed
        """
        header = document.select_one(doc, 'post_header')
        if header is None:
            raise MissingField("post_header")

        post = assemble_header(post_id, header)

        flat = [assemble_comment(el) for el in document.select(doc, 'comment')]
        post.comments = build_tree(flat, strict=self.strict_tree)

        logger.debug(
            f"Parsed submission {post_id}: {len(flat)} comments, "
            f"{len(post.comments)} threads"
        )
        return post
