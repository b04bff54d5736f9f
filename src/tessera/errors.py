"""Exceptions raised by the run loop.

Only configuration mistakes and terminal failures surface to callers;
layout arithmetic and malformed input are absorbed where they happen.
"""

from __future__ import annotations


class TesseraError(Exception):
    """Base class for all framework errors."""


class ConfigurationError(TesseraError):
    """The application was asked to do something it is not set up for."""


class TerminalError(TesseraError):
    """The terminal could not be acquired or reacquired.

    The underlying driver exception is chained as ``__cause__``.
    """
