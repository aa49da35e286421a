"""
HTML document layouts with the HTMX client script wired in.

Configure once, apply per request:

    layout = (
        LayoutOptions()
        .with_title("Todo")
        .with_styles(["/static/app.css"])
        .build()
    )
    page = layout([div("Hello")])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, TypeAlias

from .core import Attribute
from .elements import Element, Node, body, head, html_el, link, meta, script, title

logger = logging.getLogger(__name__)

HTMX_SCRIPT_URL = "https://unpkg.com/htmx.org@{version}/dist/htmx.min.js"


class HtmxVersion(Enum):
    """Published HTMX releases."""

    V2_0_0 = "2.0.0"
    V2_0_1 = "2.0.1"
    V2_0_2 = "2.0.2"
    V2_0_3 = "2.0.3"
    V2_0_4 = "2.0.4"
    V2_0_5 = "2.0.5"
    V2_0_6 = "2.0.6"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CustomVersion:
    """Any other version string, for pre-releases or older builds."""

    text: str

    def __str__(self) -> str:
        return self.text


Version: TypeAlias = HtmxVersion | CustomVersion
Layout: TypeAlias = Callable[[list[Node]], Element]


def version_string(version: Version | str) -> str:
    match version:
        case HtmxVersion():
            return version.value
        case CustomVersion(text):
            return text
        case str():
            return version
        case _:
            raise TypeError(f"Not an HTMX version: {version!r}")


def script_url(version: Version | str) -> str:
    """CDN URL of the minified HTMX script for ``version``."""
    return HTMX_SCRIPT_URL.format(version=version_string(version))


@dataclass(frozen=True)
class LayoutOptions:
    """
    Document layout configuration.

    Every ``with_*`` method returns a new copy. Scripts and styles
    accumulate across calls; title, version, body attributes and head
    extras are replaced.
    """

    title: str | None = None
    scripts: tuple[Node, ...] = ()
    styles: tuple[str, ...] = ()
    body_attrs: tuple[Attribute, ...] = ()
    head_extras: tuple[Node, ...] = ()
    version: Version | str = HtmxVersion.V2_0_6

    def with_title(self, title: str) -> LayoutOptions:
        return replace(self, title=title)

    def with_version(self, version: Version | str) -> LayoutOptions:
        return replace(self, version=version)

    def with_styles(self, urls: Iterable[str] | str) -> LayoutOptions:
        """Append stylesheet URLs, each rendered as a ``<link rel="stylesheet">``."""
        if isinstance(urls, str):
            urls = (urls,)
        return replace(self, styles=self.styles + tuple(urls))

    def with_scripts(self, scripts: Iterable[Node] | str) -> LayoutOptions:
        if isinstance(scripts, str):
            scripts = (scripts,)
        return replace(self, scripts=self.scripts + tuple(scripts))

    def with_body_attrs(self, attrs: Iterable[Attribute]) -> LayoutOptions:
        return replace(self, body_attrs=tuple(attrs))

    def with_head(self, nodes: Iterable[Node]) -> LayoutOptions:
        return replace(self, head_extras=tuple(nodes))

    def build(self) -> Layout:
        return build_layout(self)


DEFAULT_LAYOUT_OPTIONS = LayoutOptions()


def hx_layout(
    *,
    title: str | None = None,
    version: Version | str | None = None,
    styles: Iterable[str] = (),
    scripts: Iterable[Node] = (),
    body_attrs: Iterable[Attribute] = (),
    head: Iterable[Node] = (),
) -> Layout:
    """Build a layout from keywords in one call."""
    options = DEFAULT_LAYOUT_OPTIONS.with_styles(styles).with_scripts(scripts)
    options = options.with_body_attrs(body_attrs).with_head(head)
    if title is not None:
        options = options.with_title(title)
    if version is not None:
        options = options.with_version(version)
    return options.build()


def build_layout(options: LayoutOptions = DEFAULT_LAYOUT_OPTIONS) -> Layout:
    """
    Turn layout options into a function from body content to a full
    ``<html>`` element.

    The head is written in a fixed order: title, charset, viewport, the
    HTMX script, extra scripts, stylesheets, then head extras.
    """
    htmx_src = script_url(options.version)
    logger.debug(f"Building layout with htmx script {htmx_src}")

    head_nodes = (
        title(options.title or ""),
        meta(charset="utf-8"),
        meta(name="viewport", content="width=device-width, initial-scale=1"),
        script(src=htmx_src),
        *options.scripts,
        *(link(rel="stylesheet", href=url) for url in options.styles),
        *options.head_extras,
    )
    body_attrs = options.body_attrs

    def render_layout(content: list[Node]) -> Element:
        return html_el(head(*head_nodes), body(*body_attrs, *content))

    return render_layout
