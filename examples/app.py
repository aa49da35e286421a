"""
Example todo app using hxpy with FastAPI.

Run with:
    uvicorn examples.app:app --reload
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import FastAPI, Form, Response
from fastapi.responses import HTMLResponse

from hxpy import pipe, render
from hxpy.attributes import hx_confirm, hx_delete, hx_post, hx_put, hx_swap, hx_target, hx_trigger
from hxpy.elements import button, div, h1, input_, main, p, section
from hxpy.fastapi import Renderer, set_htmx_trigger, use_layout
from hxpy.layout import HtmxVersion, LayoutOptions
from hxpy.swaps import after_begin, outer_html, with_settle_delay, with_transition
from hxpy.triggers import keyup, with_key

logging.basicConfig(level=logging.DEBUG)

app = FastAPI()

layout = (
    LayoutOptions()
    .with_title("Todos")
    .with_version(HtmxVersion.V2_0_6)
    .with_styles(["https://cdn.jsdelivr.net/npm/@picocss/pico@2/css/pico.min.css"])
    .build()
)

Page = Annotated[Renderer, use_layout(layout)]


# Fake data layer


@dataclass
class Todo:
    id: int
    text: str
    done: bool = False


todos: dict[int, Todo] = {
    1: Todo(1, "Write the docs"),
    2: Todo(2, "Ship it", done=True),
}


# Views


def todo_item(todo: Todo):
    verb = "uncomplete" if todo.done else "complete"
    swap = hx_swap(with_transition(outer_html))
    return div(
        p(todo.text, class_="completed" if todo.done else None),
        button(
            "↶" if todo.done else "✓",
            hx_put(f"/todos/{todo.id}/{verb}"),
            hx_target(f"#todo-{todo.id}"),
            swap,
        ),
        button(
            "✕",
            hx_delete(f"/todos/{todo.id}"),
            hx_target(f"#todo-{todo.id}"),
            swap,
            hx_confirm("Are you sure you want to delete this todo?"),
        ),
        id=f"todo-{todo.id}",
        class_="todo-item",
    )


def add_form():
    return div(
        input_(
            hx_post("/todos"),
            hx_target("#todo-list"),
            hx_swap(pipe(after_begin, with_settle_delay(100))),
            hx_trigger(pipe(keyup, with_key("Enter"))),
            name="text",
            placeholder="What needs doing?",
        ),
        class_="add-todo",
    )


def todo_page():
    return main(
        section(
            h1("Todos"),
            add_form(),
            div([todo_item(t) for t in todos.values()], id="todo-list"),
        ),
        class_="container",
    )


# Routes


@app.get("/")
def index(page: Page):
    return page(todo_page)


@app.post("/todos")
def add_todo(text: Annotated[str, Form()]):
    todo = Todo(max(todos, default=0) + 1, text)
    todos[todo.id] = todo
    response = HTMLResponse(render(todo_item(todo)))
    return set_htmx_trigger(response, "todo-added")


@app.put("/todos/{todo_id}/{verb}")
def toggle(todo_id: int, verb: str):
    todo = todos[todo_id]
    todo.done = verb == "complete"
    return HTMLResponse(render(todo_item(todo)))


@app.delete("/todos/{todo_id}")
def remove(todo_id: int):
    todos.pop(todo_id, None)
    return Response(status_code=200)
