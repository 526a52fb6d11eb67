"""
Rebuild the comment hierarchy from the flat, indented comment rows.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Tuple

from ..exceptions import StructuralInconsistency
from ..models import Comment

logger = logging.getLogger(__name__)


def build_tree(comments: Iterable[Comment], strict: bool = False) -> List[Comment]:
    """
    Nest comments under their parents using each comment's depth.

    A comment becomes a child of the nearest preceding comment with a
    smaller depth, or a root when there is none. Sibling order is page
    order, so a pre-order walk of the result reproduces the input.

    The input comments are left untouched; the tree is built from copies,
    so the same list can be passed more than once.

    In tolerant mode (the default) a comment whose depth skips levels is
    still attached to the nearest shallower comment, or made a root if it
    has none, and its depth is rewritten to parent depth + 1 (0 for roots).
    Its replies are judged against its indentation on the page, so only the
    comment that skipped levels is reported.
    In strict mode the same situation raises StructuralInconsistency.

    Args:
        comments: Comments in page order
        strict: Raise instead of repairing inconsistent depths

    Returns:
        Root comments in page order
    """
    roots: List[Comment] = []
    # (depth as indented on the page, copy placed in the tree), root first
    stack: List[Tuple[int, Comment]] = []

    for comment in comments:
        page_depth = comment.depth

        while stack and stack[-1][0] >= page_depth:
            stack.pop()

        parent_page_depth, parent = stack[-1] if stack else (-1, None)
        depth = parent.depth + 1 if parent is not None else 0

        if page_depth != parent_page_depth + 1:
            if strict:
                raise StructuralInconsistency(
                    f"Comment {comment.id} at depth {page_depth} has no parent at depth {page_depth - 1}",
                    comment_id=comment.id,
                )
            logger.warning(
                f"Comment {comment.id} indented to depth {page_depth}, "
                f"re-leveled to {depth}"
            )

        node = replace(comment, depth=depth, children=[])

        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

        stack.append((page_depth, node))

    return roots
