"""
Core HTML value types.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from html import escape
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class SafeHTML:
    """
    Marks content as already escaped/safe.
    Immutable and hashable for use as cache keys.
    """

    content: str

    def __html__(self) -> str:
        return self.content

    def __str__(self) -> str:
        return self.content

    def __bool__(self) -> bool:
        return bool(self.content)


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    A single named HTML attribute with a string value.

    The value is kept exactly as given; escaping happens only when the
    attribute is written into markup.
    """

    name: str
    value: str

    def __html__(self) -> str:
        return f'{self.name}="{escape(self.value)}"'

    def __str__(self) -> str:
        return self.__html__()


def raw(content: str) -> SafeHTML:
    """Mark a string as safe/pre-escaped HTML. Use with caution."""
    return SafeHTML(content)


def attr(name: str, value: str | bool | None) -> SafeHTML:
    """
    Build a safe HTML attribute.

    - None or False: returns empty (attribute omitted)
    - True: returns just the attribute name (boolean attribute)
    - str: returns name="escaped_value"
    """
    if value is None or value is False:
        return SafeHTML("")
    if value is True:
        return SafeHTML(name)
    return SafeHTML(f'{name}="{escape(str(value))}"')


def pipe(value: Any, *steps: Callable[[Any], Any]) -> Any:
    """
    Thread a value through steps, left to right.

        pipe(keyup, with_key("Enter"), delay(300), once)
    """
    return reduce(lambda acc, step: step(acc), steps, value)
