"""Shared state threaded through the steps that compose a query URI."""

from typing import Callable
from urllib.parse import quote


def escape_component(value: str, allow_utf8: bool = True) -> str:
    """
    Percent-encodes a value for use as a URI path segment or query component.

    Everything except the unreserved characters (letters, digits, "-", ".", "_", "~") is escaped
    with upper-case hex digits.

    Args:
        value (str): The raw value.
        allow_utf8 (bool): If True, non-ASCII characters are kept as they are. Otherwise they are
            encoded as UTF-8 and every byte is escaped.

    Returns:
        str: The escaped value.
    """
    if not allow_utf8:
        return quote(value, safe="")
    return "".join(char if ord(char) > 127 else quote(char, safe="") for char in value)


class QueryContext:
    """
    The in-progress URI of a single composition run.

    Tracks whether a query parameter has been written yet (which decides between "?" and "&")
    and whether a step has declared the URI complete.
    """

    def __init__(self, feed_uri: str):
        self._parts: list[str] = [feed_uri]
        # a feed URI that already carries a query string continues it
        self._params_started = "?" in feed_uri
        self._finished = False

    ##########################################
    ################ GETTER ##################
    ##########################################

    def get_uri(self) -> str:
        return "".join(self._parts)

    def is_params_started(self) -> bool:
        return self._params_started

    def is_finished(self) -> bool:
        return self._finished

    ##########################################
    ################ WRITER ##################
    ##########################################

    def append(self, text: str) -> None:
        """Appends literal text without any escaping."""
        self._parts.append(text)

    def append_escaped(self, value: str, allow_utf8: bool = True) -> None:
        """Appends a dynamic value, percent-encoded with escape_component()."""
        self._parts.append(escape_component(value, allow_utf8=allow_utf8))

    def append_separator(self) -> None:
        """
        Appends "?" if this is the first query parameter, "&" otherwise, and marks the
        query string as started.
        """
        self._parts.append("&" if self._params_started else "?")
        self._params_started = True

    def append_param(self, name: str, value: str) -> None:
        """
        Appends a complete "name=value" parameter, including its separator. The value is escaped.
        """
        self.append_separator()
        self._parts.append(f"{name}=")
        self.append_escaped(value)

    def finish(self) -> None:
        """Marks the URI as complete, no further steps will be run."""
        self._finished = True


QueryStep = Callable[[QueryContext], None]


def compose_query_uri(feed_uri: str, steps: list[QueryStep]) -> str:
    """
    Runs the given steps in order against a fresh context for the feed URI.

    Args:
        feed_uri (str): The base URI of the feed being queried.
        steps (list[QueryStep]): The steps contributing to the URI, in their wire order.

    Returns:
        str: The composed URI.
    """
    context = QueryContext(feed_uri)
    for step in steps:
        if context.is_finished():
            break
        step(context)
    return context.get_uri()
