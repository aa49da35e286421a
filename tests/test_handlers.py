"""
Tests for fragment-or-page content selection.
"""

from hxpy import render
from hxpy.elements import div
from hxpy.handlers import select_content
from hxpy.layout import LayoutOptions


layout = LayoutOptions().with_title("Shell").build()


def make_content():
    calls = []

    def content():
        calls.append(1)
        return div("Content", id="content")

    return content, calls


class TestSelectContent:
    def test_fragment_returns_bare_content(self):
        content, _ = make_content()
        html = render(select_content(True, layout, content))
        assert html == '<div id="content">Content</div>'
        assert "<title>" not in html
        assert "htmx.min.js" not in html

    def test_full_page_wraps_in_layout(self):
        content, _ = make_content()
        html = render(select_content(False, layout, content))
        assert "<title>Shell</title>" in html
        assert '<body><div id="content">Content</div></body>' in html

    def test_content_called_once(self):
        for is_fragment in (True, False):
            content, calls = make_content()
            select_content(is_fragment, layout, content)
            assert len(calls) == 1

    def test_layout_receives_single_node(self):
        received = []

        def recording_layout(nodes):
            received.append(nodes)
            return div(*nodes, class_="shell")

        node = div("x")
        result = select_content(False, recording_layout, lambda: node)
        assert received == [[node]]
        assert render(result) == '<div class="shell"><div>x</div></div>'

    def test_layout_not_called_for_fragment(self):
        def failing_layout(nodes):
            raise AssertionError("layout should not run")

        node = div("x")
        assert select_content(True, failing_layout, lambda: node) is node
