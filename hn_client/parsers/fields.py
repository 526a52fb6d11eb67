"""
Field extractors.

Each function pulls one field out of an element scope and either returns
it or raises an ExtractionError. Whether a failure is fatal is decided by
the caller, not here. Vote links are the exception: a missing vote link is
a normal state and comes back as None.
"""

import re
from typing import Optional, Tuple

from bs4 import Tag

from ..exceptions import MissingField, ParseFailure
from ..models import VoteAction
from . import document

# Width in pixels of one level of the comment indentation spacer
INDENT_UNIT = 40

UPVOTE_MARKER = 'how=up'
DOWNVOTE_MARKER = 'how=un'
HIDDEN_CLASS = 'nosee'

ASCII_DIGITS = re.compile(r"[0-9]+")


def extract_username(scope: Tag) -> str:
    """Submitter or commenter name from the user link."""
    elem = document.select_one(scope, 'username')
    name = document.text(elem) if elem is not None else ''
    if not name:
        raise MissingField("username")
    return name


def extract_story_link(scope: Tag) -> Tuple[str, str]:
    """
    Title and link target of a story.

    Returns:
        (title, url) tuple; url is the raw href, relative for text posts
    """
    link = document.select_one(scope, 'story_link')
    if link is None:
        raise MissingField("title_or_url")

    url = document.attr(link, 'href')
    title = document.text(link)
    if not url or not title:
        raise MissingField("title_or_url")

    return title, url


def extract_score(scope: Tag) -> int:
    """Leading integer of the "<N> points" label."""
    elem = document.select_one(scope, 'score')
    if elem is None:
        raise MissingField("score")

    raw = document.text(elem)
    parts = raw.split()
    if not parts or not ASCII_DIGITS.fullmatch(parts[0]):
        raise ParseFailure("score", raw)
    return int(parts[0])


def extract_comment_count(scope: Tag) -> int:
    """
    Comment count from the "<N> comments" / "discuss" link.

    The last matching anchor wins; the row also links the submitter's
    other activity, which can precede it.
    """
    label = None
    for anchor in document.select(scope, 'anchor'):
        anchor_text = document.text(anchor)
        if anchor_text == 'discuss' or anchor_text.endswith(('comments', 'comment')):
            label = anchor_text

    if label is None:
        raise MissingField("comment_count")
    if label == 'discuss':
        return 0

    digits = re.sub(r"[^0-9]", "", label)
    if not digits:
        raise ParseFailure("comment_count", label)
    return int(digits)


def extract_upvote(scope: Tag) -> Optional[VoteAction]:
    """Upvote link, unless absent or hidden because the vote was already cast."""
    for anchor in document.select(scope, 'anchor'):
        href = document.attr(anchor, 'href') or ''
        if UPVOTE_MARKER not in href:
            continue
        if HIDDEN_CLASS in (document.attr(anchor, 'class') or '').split():
            continue
        return VoteAction.upvote(href)
    return None


def extract_downvote(scope: Tag) -> Optional[VoteAction]:
    """Unvote/downvote link. Its presence means the session already upvoted."""
    for anchor in document.select(scope, 'anchor'):
        href = document.attr(anchor, 'href') or ''
        if DOWNVOTE_MARKER in href:
            return VoteAction.downvote(href)
    return None


def extract_vote(upvote_scope: Tag, downvote_scope: Optional[Tag] = None) -> Optional[VoteAction]:
    """
    Preferred vote action for a story.

    On listings the upvote arrow sits in the title row and the unvote link
    in the action row, so the two can be searched in different scopes.
    An upvote wins when both are present.
    """
    if downvote_scope is None:
        downvote_scope = upvote_scope
    return extract_upvote(upvote_scope) or extract_downvote(downvote_scope)


def extract_age(scope: Tag) -> str:
    elem = document.select_one(scope, 'age')
    age = document.text(elem) if elem is not None else ''
    if not age:
        raise MissingField("age")
    return age


def extract_depth(scope: Tag) -> int:
    """Nesting level from the width of the indentation spacer image."""
    spacer = document.select_one(scope, 'indent_spacer')
    if spacer is None:
        raise MissingField("depth")

    width = document.attr(spacer, 'width')
    if width is None:
        raise MissingField("depth")
    width = width.strip()
    if not ASCII_DIGITS.fullmatch(width):
        raise ParseFailure("depth", width)
    return int(width) // INDENT_UNIT


def extract_content_html(scope: Tag) -> str:
    body = document.select_one(scope, 'comment_body')
    if body is None:
        raise MissingField("content_html")
    return document.inner_html(body)


def extract_notice(doc: Tag) -> Optional[str]:
    """First line of visible text on a page, e.g. "Bad login." on a failed login."""
    body = doc.body if doc.body is not None else doc
    return next(iter(body.stripped_strings), None)
