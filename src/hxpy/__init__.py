"""
hxpy - Typed HTMX attributes and document layouts

Compose ``hx-trigger`` and ``hx-swap`` values from typed expressions, attach
them to elements, and wrap content in a document shell with the HTMX script
included. The FastAPI integration lives in ``hxpy.fastapi``.
"""

from .core import Attribute, SafeHTML, attr, pipe, raw
from .elements import Element, Fragment, fragment, render, render_document
from .triggers import TriggerExpr, render_trigger
from .swaps import SwapExpr, render_swap
from .attributes import HX, hx_swap, hx_trigger
from .layout import (
    DEFAULT_LAYOUT_OPTIONS,
    CustomVersion,
    HtmxVersion,
    LayoutOptions,
    build_layout,
    hx_layout,
    script_url,
)
from .handlers import select_content

__version__ = "0.1.0"
__all__ = [
    # Core
    "Attribute",
    "SafeHTML",
    "attr",
    "pipe",
    "raw",
    # Elements
    "Element",
    "Fragment",
    "fragment",
    "render",
    "render_document",
    # Expressions
    "TriggerExpr",
    "render_trigger",
    "SwapExpr",
    "render_swap",
    # Attributes
    "HX",
    "hx_swap",
    "hx_trigger",
    # Layouts
    "DEFAULT_LAYOUT_OPTIONS",
    "CustomVersion",
    "HtmxVersion",
    "LayoutOptions",
    "build_layout",
    "hx_layout",
    "script_url",
    "select_content",
]
