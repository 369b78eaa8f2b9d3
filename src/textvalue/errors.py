"""TextValue error hierarchy."""

from __future__ import annotations


class TextValueError(Exception):
    """Base error for TextValue operations."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg: str = msg


class InvalidArgumentError(TextValueError, ValueError):
    """An argument is outside the domain an operation accepts."""


class UnsupportedOperationError(TextValueError, NotImplementedError):
    """The interpreter lacks a facility the operation needs."""
