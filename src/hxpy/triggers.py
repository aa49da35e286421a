"""
Typed ``hx-trigger`` expressions.

A trigger is a leaf event wrapped by any number of modifiers. Modifiers are
applied innermost first, so the last one applied is the last suffix written:

    from hxpy.core import pipe
    from hxpy.triggers import keyup, with_key, delay, once

    trigger = pipe(keyup, with_key("Enter"), delay(300), once)
    str(trigger)  # "keyup[key=='Enter'] delay:300ms once"

Nothing here validates keys, selectors or timings; every string is written
as given, the same way HTMX itself reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, TypeAlias


class Event(Enum):
    """Leaf DOM events."""

    CLICK = "click"
    SUBMIT = "submit"
    CHANGE = "change"
    KEYUP = "keyup"
    KEYDOWN = "keydown"
    MOUSEOVER = "mouseover"
    MOUSEOUT = "mouseout"
    LOAD = "load"

    def __str__(self) -> str:
        return self.value


class _Trigger:
    __slots__ = ()

    def __str__(self) -> str:
        return render_trigger(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class CustomTrigger(_Trigger):
    """Arbitrary event text, written verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class KeyFilter(_Trigger):
    """Event filter, rendered in brackets: ``keyup[key=='Enter']``."""

    base: TriggerExpr
    expression: str


@dataclass(frozen=True, slots=True)
class Once(_Trigger):
    base: TriggerExpr


@dataclass(frozen=True, slots=True)
class Delay(_Trigger):
    base: TriggerExpr
    ms: int


@dataclass(frozen=True, slots=True)
class Throttle(_Trigger):
    base: TriggerExpr
    ms: int


@dataclass(frozen=True, slots=True)
class From(_Trigger):
    """Listen for the event on another element."""

    base: TriggerExpr
    selector: str


TriggerExpr: TypeAlias = Event | CustomTrigger | KeyFilter | Once | Delay | Throttle | From
TriggerStep: TypeAlias = Callable[[TriggerExpr], TriggerExpr]


def render_trigger(expr: TriggerExpr) -> str:
    """Render a trigger expression to HTMX ``hx-trigger`` syntax."""
    match expr:
        case Event():
            return expr.value
        case CustomTrigger(text):
            return text
        case KeyFilter(base, expression):
            return f"{render_trigger(base)}[{expression}]"
        case Once(base):
            return f"{render_trigger(base)} once"
        case Delay(base, ms):
            return f"{render_trigger(base)} delay:{ms}ms"
        case Throttle(base, ms):
            return f"{render_trigger(base)} throttle:{ms}ms"
        case From(base, selector):
            return f"{render_trigger(base)} from:{selector}"
        case _:
            raise TypeError(f"Not a trigger expression: {expr!r}")


# Leaf events

click = Event.CLICK
submit = Event.SUBMIT
change = Event.CHANGE
keyup = Event.KEYUP
keydown = Event.KEYDOWN
mouseover = Event.MOUSEOVER
mouseout = Event.MOUSEOUT
load = Event.LOAD


def custom(text: str) -> CustomTrigger:
    """Custom event name (``revealed``, ``every 2s``, ``htmx:load``...)."""
    return CustomTrigger(text)


# Modifiers. Each takes its own arguments first and the base trigger last;
# called without a base they return a step for ``pipe``.


def with_key(key: str, trigger: TriggerExpr | None = None) -> TriggerExpr | TriggerStep:
    """Filter on ``event.key``: ``keyup[key=='Enter']``."""
    if trigger is None:
        return partial(with_key, key)
    return KeyFilter(trigger, f"key=='{key}'")


def with_key_code(code: int, trigger: TriggerExpr | None = None) -> TriggerExpr | TriggerStep:
    """Filter on ``event.keyCode``: ``keyup[keyCode==13]``."""
    if trigger is None:
        return partial(with_key_code, code)
    return KeyFilter(trigger, f"keyCode=={code}")


def with_filter(
    expression: str, trigger: TriggerExpr | None = None
) -> TriggerExpr | TriggerStep:
    """Arbitrary bracketed event filter."""
    if trigger is None:
        return partial(with_filter, expression)
    return KeyFilter(trigger, expression)


def once(trigger: TriggerExpr) -> Once:
    return Once(trigger)


def delay(ms: int, trigger: TriggerExpr | None = None) -> TriggerExpr | TriggerStep:
    if trigger is None:
        return partial(delay, ms)
    return Delay(trigger, ms)


def throttle(ms: int, trigger: TriggerExpr | None = None) -> TriggerExpr | TriggerStep:
    if trigger is None:
        return partial(throttle, ms)
    return Throttle(trigger, ms)


def from_(selector: str, trigger: TriggerExpr | None = None) -> TriggerExpr | TriggerStep:
    """Listen on another element: ``click from:#submit-btn``."""
    if trigger is None:
        return partial(from_, selector)
    return From(trigger, selector)


def any_of(*triggers: TriggerExpr) -> CustomTrigger:
    """Several triggers on one element: ``click, keyup[key=='Enter']``."""
    return CustomTrigger(", ".join(render_trigger(t) for t in triggers))
