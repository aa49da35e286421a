"""
HTML element factories for pure-Python composition.

Usage:
    from hxpy.elements import div, button, render
    from hxpy.attributes import hx_get, hx_target

    render(
        div(
            button("Load", hx_get("/items"), hx_target("#items"), type="button"),
            div(id="items"),
            class_="panel",
        )
    )

Keyword attributes follow the usual conventions (``class_`` -> ``class``,
``data_user_id`` -> ``data-user-id``). ``Attribute`` values and ``HX``
bundles may be passed positionally alongside children.
"""

from __future__ import annotations

from html import escape
from typing import Any, Iterable, TypeAlias

from .attributes import HX
from .core import Attribute, SafeHTML, attr


class Element:
    """
    HTML element that renders when __html__ is called.

    Attribute names are stored already normalized, in insertion order.
    """

    __slots__ = ("tag", "children", "attrs", "void")

    def __init__(
        self,
        tag: str,
        children: tuple[Any, ...],
        attrs: dict[str, Any],
        void: bool = False,
    ):
        self.tag = tag
        self.children = children
        self.attrs = attrs
        self.void = void

    def __html__(self) -> str:
        attr_str = _render_attrs(self.attrs)
        space = " " if attr_str else ""

        if self.void:
            return f"<{self.tag}{space}{attr_str}>"

        inner = _render_children(self.children)
        return f"<{self.tag}{space}{attr_str}>{inner}</{self.tag}>"

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        return (
            f"Element({self.tag!r}, children={len(self.children)}, attrs={list(self.attrs.keys())})"
        )


class Fragment:
    """Multiple children without a wrapper element."""

    __slots__ = ("children",)

    def __init__(self, *children):
        self.children = children

    def __html__(self) -> str:
        return _render_children(self.children)

    def __str__(self) -> str:
        return self.__html__()


Node: TypeAlias = Element | Fragment | SafeHTML | str


def fragment(*children) -> Fragment:
    """Render multiple children without a wrapper element."""
    return Fragment(*children)


def render(node: Any) -> str:
    """Render any node (or list of nodes) to an HTML string."""
    return _render_children((node,))


def render_document(node: Any) -> str:
    """Render a full document, prefixed with the HTML5 doctype."""
    return "<!DOCTYPE html>" + render(node)


def _render_children(children: tuple[Any, ...]) -> str:
    """Render a tuple of children to string."""
    parts = []
    for child in children:
        if child is None:
            continue

        # SafeHTML passes through
        if isinstance(child, SafeHTML):
            parts.append(child.content)
        # Elements render recursively
        elif isinstance(child, (Element, Fragment)):
            parts.append(child.__html__())
        # Strings get escaped
        elif isinstance(child, str):
            parts.append(escape(child))
        # Objects with __html__
        elif hasattr(child, "__html__"):
            parts.append(child.__html__())
        # Iterables flatten (but not strings)
        elif hasattr(child, "__iter__") and not isinstance(child, (str, bytes)):
            for item in child:
                parts.append(_render_children((item,)))
        # Everything else: str + escape
        else:
            parts.append(escape(str(child)))

    return "".join(parts)


def _render_attrs(attrs: dict[str, Any]) -> str:
    """Render attributes dict to string."""
    parts = []
    for key, value in attrs.items():
        result = attr(key, value)
        if result.content:
            parts.append(result.content)

    return " ".join(parts)


def _normalize_key(key: str) -> str:
    # class_ -> class, for_ -> for
    if key.endswith("_"):
        key = key[:-1]
    # snake_case -> kebab-case
    return key.replace("_", "-")


def _collect_attributes(items: Iterable[Any], attrs: dict[str, Any]) -> tuple[Any, ...]:
    """
    Split ``Attribute`` values (and HX bundles) out of children.

    Nested lists are searched too, so ``div([hx_get("/x"), "t"])`` lifts
    ``hx-get`` onto the ``<div>`` the same as ``div(hx_get("/x"), "t")``.
    """
    children = []
    for item in items:
        if isinstance(item, Attribute):
            attrs[item.name] = item.value
        elif isinstance(item, HX):
            for attribute in item.attributes():
                attrs[attribute.name] = attribute.value
        elif (
            hasattr(item, "__iter__")
            and not hasattr(item, "__html__")
            and not isinstance(item, (str, bytes))
        ):
            nested = _collect_attributes(item, attrs)
            if nested:
                children.append(list(nested))
        else:
            children.append(item)
    return tuple(children)


def _make_element(tag: str, void: bool = False):
    """Factory for creating element functions."""

    def element(*children, **attrs) -> Element:
        collected: dict[str, Any] = {}
        children = _collect_attributes(children, collected)
        for key, value in attrs.items():
            collected[_normalize_key(key)] = value
        return Element(tag, children, collected, void)

    element.__name__ = tag
    element.__doc__ = f"Create a <{tag}> element."
    return element


# Document structure
html_el = _make_element("html")
head = _make_element("head")
body = _make_element("body")
title = _make_element("title")
meta = _make_element("meta", void=True)
link = _make_element("link", void=True)
script = _make_element("script")
style = _make_element("style")

# Sections
section = _make_element("section")
article = _make_element("article")
header = _make_element("header")
footer = _make_element("footer")
nav = _make_element("nav")
main = _make_element("main")
div = _make_element("div")

# Headings
h1 = _make_element("h1")
h2 = _make_element("h2")
h3 = _make_element("h3")

# Text content
p = _make_element("p")
ul = _make_element("ul")
li = _make_element("li")

# Inline text
a = _make_element("a")
span = _make_element("span")
strong = _make_element("strong")

# Forms
form = _make_element("form")
label = _make_element("label")
input_ = _make_element("input", void=True)
button = _make_element("button")

# Other
br = _make_element("br", void=True)
hr = _make_element("hr", void=True)
