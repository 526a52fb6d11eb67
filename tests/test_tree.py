"""Tests for comment tree reconstruction."""

import random

import pytest

from hn_client.exceptions import StructuralInconsistency
from hn_client.models import Comment
from hn_client.parsers.tree import build_tree


def make_comments(depths):
    return [
        Comment(id=str(i), depth=d, age="1 hour ago", username=f"user{i}", content_html="")
        for i, d in enumerate(depths)
    ]


def preorder(roots):
    for root in roots:
        yield from root.walk()


def assert_depths_consistent(roots):
    for root in roots:
        assert root.depth == 0
        for comment in root.walk():
            for child in comment.children:
                assert child.depth == comment.depth + 1


def random_valid_depths(rng, length):
    depths = [0]
    for _ in range(length - 1):
        depths.append(rng.randint(0, depths[-1] + 1))
    return depths


class TestBuildTree:

    def test_empty(self):
        assert build_tree([]) == []

    def test_pop_until_parent(self):
        roots = build_tree(make_comments([0, 1, 0]))
        assert [r.id for r in roots] == ["0", "2"]
        assert [c.id for c in roots[0].children] == ["1"]
        assert roots[1].children == []

    def test_deep_chain_then_sibling(self):
        roots = build_tree(make_comments([0, 1, 2, 3, 1, 2, 0]))
        assert [r.id for r in roots] == ["0", "6"]
        first = roots[0]
        assert [c.id for c in first.children] == ["1", "4"]
        assert [c.id for c in first.children[0].children] == ["2"]
        assert [c.id for c in first.children[0].children[0].children] == ["3"]
        assert [c.id for c in first.children[1].children] == ["5"]

    def test_siblings_keep_page_order(self):
        roots = build_tree(make_comments([0, 1, 1, 1]))
        assert [c.id for c in roots[0].children] == ["1", "2", "3"]

    @pytest.mark.parametrize("seed", range(25))
    def test_valid_forests_round_trip_preorder(self, seed):
        rng = random.Random(seed)
        depths = random_valid_depths(rng, rng.randint(1, 60))
        comments = make_comments(depths)

        roots = build_tree(list(comments))

        assert [c.id for c in preorder(roots)] == [c.id for c in comments]
        assert [c.depth for c in preorder(roots)] == depths
        assert_depths_consistent(roots)

    def test_input_is_left_untouched(self):
        comments = make_comments([2, 3, 0, 1])
        first = build_tree(comments)
        second = build_tree(comments)
        assert first == second
        assert [c.depth for c in comments] == [2, 3, 0, 1]
        assert all(c.children == [] for c in comments)
        assert len(list(preorder(second))) == 4

    def test_strict_accepts_valid_forest(self):
        roots = build_tree(make_comments([0, 1, 2, 0]), strict=True)
        assert len(roots) == 2


class TestTolerantMode:

    def test_first_comment_not_at_root_becomes_root(self):
        roots = build_tree(make_comments([2, 3, 0]))
        assert [r.id for r in roots] == ["0", "2"]
        assert roots[0].depth == 0
        assert [c.id for c in roots[0].children] == ["1"]
        assert roots[0].children[0].depth == 1
        assert_depths_consistent(roots)

    def test_skipped_level_attaches_to_nearest_shallower(self):
        roots = build_tree(make_comments([0, 2, 2, 1]))
        assert [c.id for c in roots[0].children] == ["1", "2", "3"]
        assert all(c.depth == 1 for c in roots[0].children)
        assert_depths_consistent(roots)

    def test_repairs_are_logged(self, caplog):
        with caplog.at_level("WARNING", logger="hn_client.parsers.tree"):
            build_tree(make_comments([1]))
        assert "re-leveled to 0" in caplog.text

    def test_replies_of_releveled_comment_are_not_reported(self, caplog):
        with caplog.at_level("WARNING", logger="hn_client.parsers.tree"):
            roots = build_tree(make_comments([2, 3, 4]))
        warnings = [r for r in caplog.records if "re-leveled" in r.getMessage()]
        assert len(warnings) == 1
        assert "Comment 0 " in warnings[0].getMessage()
        assert [c.depth for c in preorder(roots)] == [0, 1, 2]


class TestStrictMode:

    def test_first_comment_not_at_root(self):
        with pytest.raises(StructuralInconsistency) as exc_info:
            build_tree(make_comments([1, 0]), strict=True)
        assert exc_info.value.comment_id == "0"

    def test_skipped_level(self):
        with pytest.raises(StructuralInconsistency) as exc_info:
            build_tree(make_comments([0, 1, 3]), strict=True)
        assert exc_info.value.comment_id == "2"
