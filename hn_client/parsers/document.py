"""
Thin navigation layer over BeautifulSoup.

Field extractors only talk to pages through these functions so that the
whitespace and sibling rules live in one place.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag
from soupsieve import SoupSieve

from .selectors import SELECTORS

Selector = Union[str, SoupSieve]


def parse(content: Union[bytes, str]) -> BeautifulSoup:
    """Parse raw page bytes into a navigable document."""
    return BeautifulSoup(content, 'lxml')


def _compiled(selector: Selector) -> SoupSieve:
    return SELECTORS[selector] if isinstance(selector, str) else selector


def select(scope: Tag, selector: Selector) -> List[Tag]:
    """
    All descendants of scope matching selector, in document order.

    Args:
        scope: Element (or whole document) to search under
        selector: Role name from the selector table, or a compiled selector
    """
    return _compiled(selector).select(scope)


def select_one(scope: Tag, selector: Selector) -> Optional[Tag]:
    """First descendant matching selector, or None."""
    return _compiled(selector).select_one(scope)


def attr(element: Tag, name: str) -> Optional[str]:
    """
    Read an attribute as a single string.

    Multi-valued attributes such as class come back space-joined.
    """
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return ' '.join(value)
    return value


def text(element: Tag) -> str:
    """
    Text content with whitespace normalised.

    Each text node is trimmed, empty ones are dropped, the rest are joined
    with single spaces and internal runs collapse to one space.
    """
    return ' '.join(element.get_text(' ').split())


def inner_html(element: Tag) -> str:
    """Raw markup of the element's children, without the element's own tag."""
    return element.decode_contents()


def next_sibling(element: Tag) -> Optional[Tag]:
    """Next element sibling, skipping whitespace text nodes."""
    return element.find_next_sibling()
