"""Errors raised by formfrag elements."""

from __future__ import annotations


class ValidationError(ValueError):
    """A setter or constructor received a value the element cannot hold.

    Raised synchronously to the caller (e.g. a non-numeric value for a
    number input). Nothing inside the package catches it.
    """


__all__ = ["ValidationError"]
