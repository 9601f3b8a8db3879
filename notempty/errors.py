"""Exceptions raised while configuring a validator."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A rule selector, option or message key could not be interpreted.

    Raised synchronously at configuration time. A value that is merely empty
    never raises; it is reported through ``NotEmpty.get_messages()``.
    """
