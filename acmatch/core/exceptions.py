from __future__ import annotations


class AcMatchError(Exception):
    """Base class for errors raised by acmatch."""


class InvalidArgumentError(AcMatchError, ValueError):
    """An argument is outside the domain an operation accepts."""
