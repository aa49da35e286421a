"""FastAPI integration: HTMX request headers, response headers and adaptive pages."""

from __future__ import annotations

import logging
from functools import partial
from typing import Annotated, Any, Callable, TypeAlias

from fastapi import Depends, Request, Response
from fastapi.responses import HTMLResponse

from .elements import Node, render, render_document
from .handlers import select_content
from .layout import Layout

logger = logging.getLogger(__name__)


# --- Request introspection ---


def is_htmx(request: Request) -> bool:
    """Check if request is from HTMX (HX-Request header present)."""
    return "HX-Request" in request.headers


def htmx_target(request: Request) -> str | None:
    """Get HTMX target element ID."""
    return request.headers.get("HX-Target")


def htmx_trigger(request: Request) -> str | None:
    """Get HTMX trigger element ID."""
    return request.headers.get("HX-Trigger")


def htmx_trigger_name(request: Request) -> str | None:
    """Get the name attribute of the triggering element."""
    return request.headers.get("HX-Trigger-Name")


def htmx_current_url(request: Request) -> str | None:
    """Get the browser URL at the time of the request."""
    return request.headers.get("HX-Current-URL")


def htmx_prompt(request: Request) -> str | None:
    """Get the user's answer to an hx-prompt."""
    return request.headers.get("HX-Prompt")


HtmxRequest = Annotated[bool, Depends(is_htmx)]


# --- Response headers ---


def set_htmx_header(response: Response, name: str, value: str) -> Response:
    response.headers[name] = value
    return response


def set_htmx_redirect(response: Response, url: str) -> Response:
    """Client-side redirect to ``url``."""
    return set_htmx_header(response, "HX-Redirect", url)


def set_htmx_push_url(response: Response, url: str) -> Response:
    return set_htmx_header(response, "HX-Push-Url", url)


def set_htmx_replace_url(response: Response, url: str) -> Response:
    return set_htmx_header(response, "HX-Replace-Url", url)


def set_htmx_refresh(response: Response) -> Response:
    """Force a full page refresh."""
    return set_htmx_header(response, "HX-Refresh", "true")


def set_htmx_trigger(response: Response, event: str) -> Response:
    """Fire a client-side event. ``event`` may be a name or a JSON object."""
    return set_htmx_header(response, "HX-Trigger", event)


def htmx_redirect(url: str) -> Response:
    """Redirect via HTMX HX-Redirect header."""
    return set_htmx_redirect(Response(status_code=200), url)


def htmx_refresh() -> Response:
    """Trigger full page refresh via HTMX."""
    return set_htmx_refresh(Response(status_code=200))


# --- Adaptive pages ---


def htmx_response(
    request: Request,
    layout: Layout,
    content: Callable[[], Node],
    **kwargs: Any,
) -> HTMLResponse:
    """
    Render ``content`` alone for HTMX requests, or wrapped in ``layout`` as a
    full document otherwise.
    """
    fragment = is_htmx(request)
    node = select_content(fragment, layout, content)
    if fragment:
        logger.debug(f"Rendering fragment for {request.url.path}")
        return HTMLResponse(render(node), **kwargs)

    logger.debug(f"Rendering full page for {request.url.path}")
    return HTMLResponse(render_document(node), **kwargs)


Renderer: TypeAlias = Callable[[Callable[[], Node]], HTMLResponse]


def use_layout(layout: Layout) -> Any:
    """
    FastAPI dependency that binds a layout to the current request.

    Usage:
        app_layout = LayoutOptions().with_title("Todo").build()

        @app.get("/")
        def index(page: Annotated[Renderer, use_layout(app_layout)]):
            return page(lambda: div("Hello"))
    """

    def dependency(request: Request) -> Renderer:
        return partial(htmx_response, request, layout)

    return Depends(dependency)
