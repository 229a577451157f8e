"""Exceptions raised by plivoclient.

Remote failures are not raised: they are reported on the ``error`` field of
the returned response record. Only problems the caller can fix before a
request is sent, or while building an XML document, surface as exceptions.
"""

from __future__ import annotations


class PlivoError(Exception):
    """Base class for all plivoclient errors."""


class MissingParameterError(PlivoError):
    """A mandatory request parameter was not supplied."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing mandatory parameter {parameter}.")
        self.parameter = parameter


class PlivoXMLError(PlivoError):
    """An element was attached to a parent that does not allow it."""
