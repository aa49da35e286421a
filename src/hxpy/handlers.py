"""
Fragment-or-page content selection.
"""

from __future__ import annotations

from typing import Callable

from .elements import Element, Node
from .layout import Layout


def select_content(
    is_fragment: bool,
    layout: Layout,
    content: Callable[[], Node],
) -> Node | Element:
    """
    Return bare content for HTMX fragment requests, or the content wrapped in
    ``layout`` for full page loads. ``content`` is called exactly once.
    """
    node = content()
    if is_fragment:
        return node
    return layout([node])
