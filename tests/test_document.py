"""Tests for the document navigation layer and selector table."""

import pytest
import soupsieve

from hn_client.exceptions import ConfigurationError
from hn_client.parsers import document
from hn_client.parsers.selectors import SELECTOR_SOURCES, SELECTORS, compile_selectors


def test_text_normalises_whitespace():
    doc = document.parse("<p>  Ask\n HN:   <b>what</b>\t<i> </i>now?  </p>")
    assert document.text(doc.p) == "Ask HN: what now?"


def test_text_treats_nbsp_as_space():
    doc = document.parse("<a>12&nbsp;comments</a>")
    assert document.text(doc.a) == "12 comments"


def test_attr_joins_multi_valued_attributes():
    doc = document.parse('<table><tr class="athing comtr" id="5"></tr></table>')
    row = document.select_one(doc, soupsieve.compile("tr"))
    assert document.attr(row, 'class') == "athing comtr"
    assert document.attr(row, 'id') == "5"
    assert document.attr(row, 'width') is None


def test_next_sibling_skips_text_nodes():
    doc = document.parse("<table><tr id='a'></tr>\n   <tr id='b'></tr></table>")
    first = doc.find('tr')
    assert document.attr(document.next_sibling(first), 'id') == "b"
    assert document.next_sibling(document.next_sibling(first)) is None


def test_inner_html_excludes_own_tag():
    doc = document.parse('<div class="comment"><span>hi</span> there</div>')
    assert document.inner_html(doc.div) == "<span>hi</span> there"


def test_select_by_role_name():
    doc = document.parse('<span class="hnuser">a</span><span class="hnuser">b</span>')
    assert [document.text(e) for e in document.select(doc, 'username')] == ["a", "b"]
    assert document.select_one(doc, 'score') is None


def test_selector_table_is_fully_compiled():
    assert set(SELECTORS) == set(SELECTOR_SOURCES)


def test_bad_selector_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        compile_selectors({'broken': 'tr[[athing'})
    assert 'broken' in str(exc_info.value)
