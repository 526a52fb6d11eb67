"""
Precompiled CSS selectors for Hacker News markup.

Compiled once at import. A selector that does not compile is a broken
install, not a bad page, so it surfaces as ConfigurationError.
"""

from typing import Dict

import soupsieve
from soupsieve import SoupSieve

from ..exceptions import ConfigurationError

# Raw selector strings, keyed by the role they play in extraction
SELECTOR_SOURCES: Dict[str, str] = {
    # Listing page
    'listing_row': 'tr.athing:not(.comtr)',
    # Any page
    'username': '.hnuser',
    'story_link': '.storylink, .titleline > a',
    'score': '.score',
    'anchor': 'a',
    # Submission page
    'post_header': '.fatitem',
    'story_row': 'tr.athing',
    'subtext': '.subtext',
    'comment': '.comment-tree .athing.comtr',
    'indent_spacer': '.ind img',
    'age': '.age',
    'comment_body': '.comment',
    'vote_links': '.votelinks',
}


def compile_selectors(sources: Dict[str, str]) -> Dict[str, SoupSieve]:
    """
    Compile a table of selector strings.

    Args:
        sources: Mapping of role name to CSS selector

    Returns:
        Mapping of role name to compiled selector

    Raises:
        ConfigurationError: If any selector fails to compile
    """
    compiled = {}
    for name, pattern in sources.items():
        try:
            compiled[name] = soupsieve.compile(pattern)
        except soupsieve.SelectorSyntaxError as e:
            raise ConfigurationError(f"Invalid selector for {name!r}: {pattern!r}") from e
    return compiled


SELECTORS: Dict[str, SoupSieve] = compile_selectors(SELECTOR_SOURCES)
