"""
Tests for hxpy element factories.
"""

from hxpy import Attribute, SafeHTML
from hxpy.elements import (
    a,
    article,
    br,
    button,
    div,
    footer,
    form,
    fragment,
    h1,
    h2,
    h3,
    hr,
    input_,
    label,
    li,
    meta,
    nav,
    p,
    render,
    render_document,
    section,
    span,
    style,
    ul,
)


class TestElementBasics:
    def test_simple_element(self):
        assert render(div("Hello")) == "<div>Hello</div>"

    def test_nested_elements(self):
        assert render(div(span("inner"))) == "<div><span>inner</span></div>"

    def test_multiple_children(self):
        el = div(span("one"), span("two"), span("three"))
        assert render(el) == "<div><span>one</span><span>two</span><span>three</span></div>"

    def test_empty_element(self):
        assert render(div()) == "<div></div>"

    def test_void_element(self):
        assert render(br()) == "<br>"

    def test_void_element_with_attrs(self):
        html = render(meta(charset="utf-8"))
        assert html == '<meta charset="utf-8">'
        assert "</meta>" not in html

    def test_str_and_html(self):
        el = p("x")
        assert str(el) == el.__html__() == "<p>x</p>"


class TestAttributes:
    def test_simple_attribute(self):
        assert render(div(id="main")) == '<div id="main"></div>'

    def test_class_underscore(self):
        assert 'class="container"' in render(div(class_="container"))

    def test_for_underscore(self):
        assert 'for="email"' in render(label(for_="email"))

    def test_data_attribute(self):
        assert 'data-user-id="123"' in render(div(data_user_id="123"))

    def test_boolean_true_attribute(self):
        html = render(input_(disabled=True))
        assert "disabled" in html
        assert 'disabled="' not in html

    def test_boolean_false_attribute(self):
        assert "disabled" not in render(input_(disabled=False))

    def test_none_attribute(self):
        assert "title" not in render(div(title=None))

    def test_attribute_escaping(self):
        assert 'title="Say &quot;hello&quot;"' in render(div(title='Say "hello"'))

    def test_positional_attribute(self):
        el = div("text", Attribute("hx-get", "/a"), id="x")
        assert render(el) == '<div hx-get="/a" id="x">text</div>'

    def test_positional_attribute_name_untouched(self):
        el = div(Attribute("hx-on:htmx:before_request", "go()"))
        assert 'hx-on:htmx:before_request="go()"' in render(el)

    def test_empty_value_attribute(self):
        assert render(div(Attribute("hx-preserve", ""))) == '<div hx-preserve=""></div>'


class TestChildrenEscaping:
    def test_string_escaped(self):
        html = render(div("<script>alert('xss')</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_safehtml_not_escaped(self):
        assert "<strong>bold</strong>" in render(div(SafeHTML("<strong>bold</strong>")))

    def test_none_child_ignored(self):
        assert render(div("before", None, "after")) == "<div>beforeafter</div>"

    def test_numbers(self):
        assert render(span(3)) == "<span>3</span>"


class TestListChildren:
    def test_list_of_elements(self):
        html = render(ul([li("one"), li("two")]))
        assert html == "<ul><li>one</li><li>two</li></ul>"

    def test_mixed_children_and_list(self):
        html = render(div(h1("Title"), [p(f"Para {i}") for i in range(2)], footer("End")))
        assert html == "<div><h1>Title</h1><p>Para 0</p><p>Para 1</p><footer>End</footer></div>"

    def test_render_list(self):
        assert render([p("a"), p("b")]) == "<p>a</p><p>b</p>"

    def test_attribute_in_list_lifted(self):
        el = div([Attribute("hx-get", "/x"), "t"])
        assert render(el) == '<div hx-get="/x">t</div>'

    def test_attribute_in_nested_list_lifted(self):
        el = div([[Attribute("hx-target", "#out")], p("a")], ("b", Attribute("hx-get", "/x")))
        assert render(el) == '<div hx-target="#out" hx-get="/x"><p>a</p>b</div>'

    def test_attribute_in_generator_lifted(self):
        el = ul(Attribute(f"data-{n}", str(n)) if n == 0 else li(str(n)) for n in range(3))
        assert render(el) == '<ul data-0="0"><li>1</li><li>2</li></ul>'

    def test_list_of_only_attributes_leaves_no_child(self):
        el = div([Attribute("hx-get", "/x")])
        assert el.children == ()
        assert render(el) == '<div hx-get="/x"></div>'


class TestFragment:
    def test_fragment_basic(self):
        assert render(fragment(div("one"), div("two"))) == "<div>one</div><div>two</div>"

    def test_fragment_as_child(self):
        assert render(ul(fragment(li("a"), li("b")))) == "<ul><li>a</li><li>b</li></ul>"

    def test_empty_fragment(self):
        assert render(fragment()) == ""


class TestCommonPatterns:
    def test_form_structure(self):
        el = form(
            label("Email", input_(type="email", name="email")),
            button("Submit", type="submit"),
            action="/login",
            method="post",
        )
        html = render(el)
        assert 'action="/login"' in html
        assert 'method="post"' in html
        assert 'type="email"' in html

    def test_nav_structure(self):
        links = [("Home", "/"), ("About", "/about")]
        html = render(nav(ul([li(a(text, href=url)) for text, url in links]), class_="main-nav"))
        assert 'class="main-nav"' in html
        assert 'href="/about"' in html
        assert ">Home</a>" in html

    def test_render_document(self):
        assert render_document(section("x")) == "<!DOCTYPE html><section>x</section>"


class TestFactories:
    def test_headings(self):
        assert render(h2("Sub")) == "<h2>Sub</h2>"
        assert render(h3("Minor", class_="muted")) == '<h3 class="muted">Minor</h3>'

    def test_article(self):
        assert render(article(p("body"), id="post-1")) == '<article id="post-1"><p>body</p></article>'

    def test_hr_is_void(self):
        assert render(hr()) == "<hr>"
        assert render(hr(class_="divider")) == '<hr class="divider">'

    def test_style_raw_css(self):
        css = SafeHTML(".htmx-request { opacity: .5 }")
        assert render(style(css)) == "<style>.htmx-request { opacity: .5 }</style>"


class TestElementRepr:
    def test_repr(self):
        r = repr(div(span("hello"), class_="container", id="main"))
        assert "Element" in r
        assert "div" in r
