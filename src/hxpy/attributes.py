"""
HTMX attribute helpers.

Every ``hx_*`` function returns a single ``Attribute`` that element
factories accept positionally:

    button("Load", hx_get("/items"), hx_trigger(pipe(click, once)))

``HX`` bundles many of them in one value, for templates that want a single
object to interpolate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .core import Attribute
from .swaps import SwapExpr, render_swap
from .triggers import TriggerExpr, render_trigger


def _flag(value: bool) -> str:
    return "true" if value else "false"


# Requests


def hx_get(url: str) -> Attribute:
    return Attribute("hx-get", url)


def hx_post(url: str) -> Attribute:
    return Attribute("hx-post", url)


def hx_put(url: str) -> Attribute:
    return Attribute("hx-put", url)


def hx_delete(url: str) -> Attribute:
    return Attribute("hx-delete", url)


def hx_patch(url: str) -> Attribute:
    return Attribute("hx-patch", url)


# Triggering and swapping


def hx_trigger(trigger: TriggerExpr | str) -> Attribute:
    """``hx-trigger`` from a typed trigger expression or a raw string."""
    if isinstance(trigger, str):
        return Attribute("hx-trigger", trigger)
    return Attribute("hx-trigger", render_trigger(trigger))


def hx_swap(swap: SwapExpr | str) -> Attribute:
    """``hx-swap`` from a typed swap expression or a raw string."""
    if isinstance(swap, str):
        return Attribute("hx-swap", swap)
    return Attribute("hx-swap", render_swap(swap))


def hx_target(target: str) -> Attribute:
    return Attribute("hx-target", target)


def hx_select(select: str) -> Attribute:
    return Attribute("hx-select", select)


def hx_select_oob(select_oob: str) -> Attribute:
    return Attribute("hx-select-oob", select_oob)


def hx_swap_oob(value: str) -> Attribute:
    return Attribute("hx-swap-oob", value)


def hx_oob(value: str | bool = "") -> Attribute:
    """``hx_oob()`` renders ``hx-oob=""``; ``hx_oob(True)`` renders ``hx-oob="true"``."""
    if isinstance(value, bool):
        value = _flag(value)
    return Attribute("hx-oob", value)


def hx_preserve(value: str | bool = "") -> Attribute:
    if isinstance(value, bool):
        value = _flag(value)
    return Attribute("hx-preserve", value)


# Request parameters


def hx_vals(vals: str) -> Attribute:
    """Extra values as a JSON string."""
    return Attribute("hx-vals", vals)


def hx_include(include: str) -> Attribute:
    return Attribute("hx-include", include)


def hx_params(params: str) -> Attribute:
    """``*``, ``none``, or a comma separated list of names."""
    return Attribute("hx-params", params)


def hx_headers(headers: str) -> Attribute:
    return Attribute("hx-headers", headers)


def hx_encoding(encoding: str) -> Attribute:
    return Attribute("hx-encoding", encoding)


def hx_request(request: str) -> Attribute:
    return Attribute("hx-request", request)


def hx_sync(sync: str) -> Attribute:
    return Attribute("hx-sync", sync)


# History


def hx_boost(boost: bool = True) -> Attribute:
    return Attribute("hx-boost", _flag(boost))


def hx_push_url(push_url: str | bool) -> Attribute:
    if isinstance(push_url, bool):
        push_url = _flag(push_url)
    return Attribute("hx-push-url", push_url)


def hx_replace_url(url: str | bool) -> Attribute:
    if isinstance(url, bool):
        url = _flag(url)
    return Attribute("hx-replace-url", url)


def hx_history(history: bool = True) -> Attribute:
    return Attribute("hx-history", _flag(history))


# UI


def hx_indicator(indicator: str) -> Attribute:
    return Attribute("hx-indicator", indicator)


def hx_confirm(confirm: str) -> Attribute:
    return Attribute("hx-confirm", confirm)


def hx_disable() -> Attribute:
    return Attribute("hx-disable", "")


def hx_disinherit(disinherit: str) -> Attribute:
    return Attribute("hx-disinherit", disinherit)


def hx_ext(ext: str) -> Attribute:
    return Attribute("hx-ext", ext)


def hx_sse(sse: str) -> Attribute:
    return Attribute("hx-sse", sse)


def hx_ws(ws: str) -> Attribute:
    return Attribute("hx-ws", ws)


def hx_on(event: str, code: str) -> Attribute:
    """Inline handler: ``hx-on:htmx:after-request="..."``."""
    return Attribute(f"hx-on:{event}", code)


@dataclass
class HX:
    """
    HTMX attribute builder.

    Usage:
        hx = HX(get="/api/data", target="#results", swap=with_transition(inner_html))
        button("Load", hx)
        str(hx)  # 'hx-get="/api/data" hx-target="#results" hx-swap="innerHTML transition:true"'
    """

    get: str | None = None
    post: str | None = None
    put: str | None = None
    patch: str | None = None
    delete: str | None = None
    target: str | None = None
    swap: SwapExpr | str | None = None
    trigger: TriggerExpr | str | None = None
    push_url: bool | str | None = None
    replace_url: bool | str | None = None
    select: str | None = None
    select_oob: str | None = None
    swap_oob: str | None = None
    include: str | None = None
    vals: str | None = None
    confirm: str | None = None
    disable: bool = False
    indicator: str | None = None
    boost: bool | None = None
    preserve: bool = False
    sync: str | None = None
    params: str | None = None
    encoding: str | None = None
    ext: str | None = None
    headers: str | None = None
    history: bool | None = None
    on: dict[str, str] = field(default_factory=dict)

    def attributes(self) -> Iterator[Attribute]:
        if self.get:
            yield hx_get(self.get)
        if self.post:
            yield hx_post(self.post)
        if self.put:
            yield hx_put(self.put)
        if self.patch:
            yield hx_patch(self.patch)
        if self.delete:
            yield hx_delete(self.delete)
        if self.target:
            yield hx_target(self.target)
        if self.swap is not None:
            yield hx_swap(self.swap)
        if self.trigger is not None:
            yield hx_trigger(self.trigger)
        if self.push_url is not None:
            yield hx_push_url(self.push_url)
        if self.replace_url is not None:
            yield hx_replace_url(self.replace_url)
        if self.select:
            yield hx_select(self.select)
        if self.select_oob:
            yield hx_select_oob(self.select_oob)
        if self.swap_oob:
            yield hx_swap_oob(self.swap_oob)
        if self.include:
            yield hx_include(self.include)
        if self.vals:
            yield hx_vals(self.vals)
        if self.confirm:
            yield hx_confirm(self.confirm)
        if self.disable:
            yield hx_disable()
        if self.indicator:
            yield hx_indicator(self.indicator)
        if self.boost is not None:
            yield hx_boost(self.boost)
        if self.preserve:
            yield hx_preserve()
        if self.sync:
            yield hx_sync(self.sync)
        if self.params:
            yield hx_params(self.params)
        if self.encoding:
            yield hx_encoding(self.encoding)
        if self.ext:
            yield hx_ext(self.ext)
        if self.headers:
            yield hx_headers(self.headers)
        if self.history is not None:
            yield hx_history(self.history)
        for event, handler in self.on.items():
            yield hx_on(event, handler)

    def __str__(self) -> str:
        return " ".join(a.__html__() for a in self.attributes())

    def __html__(self) -> str:
        return str(self)
