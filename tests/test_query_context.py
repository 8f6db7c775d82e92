import pytest

from docquery.query.QueryContext import QueryContext, compose_query_uri, escape_component


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("abcXYZ019", "abcXYZ019"),
        ("-._~", "-._~"),
        ("Annual Report", "Annual%20Report"),
        ("a@x.com", "a%40x.com"),
        ("a/b?c&d=e;f:g", "a%2Fb%3Fc%26d%3De%3Bf%3Ag"),
        ("100%", "100%25"),
        ("plus+sign", "plus%2Bsign"),
    ],
)
def test_escape_component_ascii(value, expected):
    assert escape_component(value) == expected


def test_escape_component_keeps_utf8_when_allowed():
    assert escape_component("Bericht Über") == "Bericht%20Über"


def test_escape_component_encodes_utf8_when_not_allowed():
    assert escape_component("Über", allow_utf8=False) == "%C3%9Cber"


def test_separator_starts_with_question_mark():
    context = QueryContext("http://example.com/feed")
    assert context.is_params_started() is False
    context.append_separator()
    context.append("a=1")
    context.append_separator()
    context.append("b=2")
    assert context.get_uri() == "http://example.com/feed?a=1&b=2"
    assert context.is_params_started() is True


def test_feed_uri_with_query_string_continues_it():
    context = QueryContext("http://example.com/feed?alt=atom")
    context.append_param("q", "x y")
    assert context.get_uri() == "http://example.com/feed?alt=atom&q=x%20y"


def test_compose_stops_after_finish():
    calls = []

    def finishing_step(context: QueryContext) -> None:
        calls.append("finishing")
        context.append("/entry")
        context.finish()

    def later_step(context: QueryContext) -> None:
        calls.append("later")

    uri = compose_query_uri("http://example.com/feed", [finishing_step, later_step])
    assert uri == "http://example.com/feed/entry"
    assert calls == ["finishing"]


def test_compose_without_steps_returns_feed_uri():
    assert compose_query_uri("http://example.com/feed", []) == "http://example.com/feed"
