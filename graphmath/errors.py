"""Exceptions raised by graphmath."""


class InvalidArgument(ValueError):
    """An argument failed validation before any computation started."""
