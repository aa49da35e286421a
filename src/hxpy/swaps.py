"""
Typed ``hx-swap`` expressions.

A swap is one base strategy followed by an ordered list of modifiers:

    from hxpy.core import pipe
    from hxpy.swaps import inner_html, with_transition, with_swap_delay

    swap = pipe(inner_html, with_transition, with_swap_delay(100))
    str(swap)  # "innerHTML transition:true swap:100ms"

The ``with_*`` builders append to an existing modifier list instead of
wrapping it again, so the base token is always written once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Iterable, TypeAlias


class Strategy(Enum):
    """Fixed swap strategies."""

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


# Modifiers


@dataclass(frozen=True, slots=True)
class Transition:
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class SwapDelay:
    ms: int


@dataclass(frozen=True, slots=True)
class SettleDelay:
    ms: int


@dataclass(frozen=True, slots=True)
class IgnoreTitle:
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class Scroll:
    target: str


@dataclass(frozen=True, slots=True)
class Show:
    target: str


SwapModifier: TypeAlias = Transition | SwapDelay | SettleDelay | IgnoreTitle | Scroll | Show


class _Swap:
    __slots__ = ()

    def __str__(self) -> str:
        return render_swap(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class CustomSwap(_Swap):
    """Arbitrary swap text, written verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class WithModifiers(_Swap):
    base: SwapExpr
    modifiers: tuple[SwapModifier, ...] = ()

    def __post_init__(self) -> None:
        # Lists are accepted but stored as tuples to stay hashable
        object.__setattr__(self, "modifiers", tuple(self.modifiers))


SwapExpr: TypeAlias = Strategy | CustomSwap | WithModifiers
SwapStep: TypeAlias = Callable[[SwapExpr], SwapExpr]


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_modifier(modifier: SwapModifier) -> str:
    match modifier:
        case Transition(enabled):
            return f"transition:{_flag(enabled)}"
        case SwapDelay(ms):
            return f"swap:{ms}ms"
        case SettleDelay(ms):
            return f"settle:{ms}ms"
        case IgnoreTitle(enabled):
            return f"ignoreTitle:{_flag(enabled)}"
        case Scroll(target):
            return f"scroll:{target}"
        case Show(target):
            return f"show:{target}"
        case _:
            raise TypeError(f"Not a swap modifier: {modifier!r}")


def render_swap(expr: SwapExpr) -> str:
    """Render a swap expression to HTMX ``hx-swap`` syntax."""
    match expr:
        case Strategy():
            return expr.value
        case CustomSwap(text):
            return text
        case WithModifiers(base, modifiers):
            if not modifiers:
                return render_swap(base)
            return " ".join([render_swap(base), *(render_modifier(m) for m in modifiers)])
        case _:
            raise TypeError(f"Not a swap expression: {expr!r}")


# Strategies

inner_html = Strategy.INNER_HTML
outer_html = Strategy.OUTER_HTML
before_begin = Strategy.BEFORE_BEGIN
after_begin = Strategy.AFTER_BEGIN
before_end = Strategy.BEFORE_END
after_end = Strategy.AFTER_END
delete = Strategy.DELETE
none = Strategy.NONE


def custom(text: str) -> CustomSwap:
    return CustomSwap(text)


# Builders. Modifier arguments first, base swap last; without a base they
# return a step for ``pipe``.


def with_modifiers(
    modifiers: Iterable[SwapModifier], swap: SwapExpr | None = None
) -> WithModifiers | SwapStep:
    """Attach modifiers, extending an existing modifier list if there is one."""
    modifiers = tuple(modifiers)
    if swap is None:
        return partial(with_modifiers, modifiers)
    if isinstance(swap, WithModifiers):
        return WithModifiers(swap.base, swap.modifiers + modifiers)
    return WithModifiers(swap, modifiers)


def with_transition(
    enabled: bool | SwapExpr = True, swap: SwapExpr | None = None
) -> WithModifiers | SwapStep:
    """
    ``with_transition(False)`` is a step; ``with_transition(inner_html)``
    attaches ``transition:true`` directly.
    """
    if not isinstance(enabled, bool):
        return with_modifiers([Transition(True)], enabled)
    if swap is None:
        return partial(with_transition, enabled)
    return with_modifiers([Transition(enabled)], swap)


def with_ignore_title(
    enabled: bool | SwapExpr = True, swap: SwapExpr | None = None
) -> WithModifiers | SwapStep:
    if not isinstance(enabled, bool):
        return with_modifiers([IgnoreTitle(True)], enabled)
    if swap is None:
        return partial(with_ignore_title, enabled)
    return with_modifiers([IgnoreTitle(enabled)], swap)


def with_swap_delay(ms: int, swap: SwapExpr | None = None) -> WithModifiers | SwapStep:
    return with_modifiers([SwapDelay(ms)], swap)


def with_settle_delay(ms: int, swap: SwapExpr | None = None) -> WithModifiers | SwapStep:
    return with_modifiers([SettleDelay(ms)], swap)


def with_scroll(target: str, swap: SwapExpr | None = None) -> WithModifiers | SwapStep:
    """Scroll after swap: ``top``, ``bottom`` or ``#el:top``."""
    return with_modifiers([Scroll(target)], swap)


def with_show(target: str, swap: SwapExpr | None = None) -> WithModifiers | SwapStep:
    return with_modifiers([Show(target)], swap)
