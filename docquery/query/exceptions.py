"""Errors raised while configuring a query."""


class InvalidArgument(ValueError):
    """Raised when a required query argument is empty or missing, e.g. an e-mail address."""
